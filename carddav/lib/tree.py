#!/usr/bin/env python
"""
Namespace-agnostic lookups in the XML trees delivered by the server.

WebDAV servers are free to pick whatever namespace prefixes they like,
and some of the properties we are interested in (like getctag) live in
vendor namespaces, so all comparisons here are done on the local name
of the element only.
"""
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element


def local_name(element: Union[_Element, str]) -> str:
    """Returns the tag of an element (or a tag) without the {namespace} part"""
    tag = element if isinstance(element, str) else element.tag
    return etree.QName(tag).localname


def children(element: _Element):
    """Iterates the child elements, skipping comments and processing instructions"""
    return element.iterchildren(etree.Element)


def find_child(element: _Element, name: str) -> Optional[_Element]:
    """Returns the first direct child element with the given local name"""
    for child in children(element):
        if local_name(child) == name:
            return child
    return None


def find_element(root: _Element, name: str) -> Optional[_Element]:
    """
    Depth-first search for the first element below root with the
    given local name.

    Mind that this is not a search through the full subtree.  The
    children are visited in document order, and the first child that
    does not match but has children of its own is searched recursively
    - whatever comes out of that search is returned, later siblings
    are never looked at.  The property trees in a multistatus response
    are shallow and the element we look for sits on the first nested
    path, so this is sufficient (and it decides which element wins if
    the name occurs several places).
    """
    for elem in children(root):
        if local_name(elem) == name:
            return elem
        elif next(children(elem), None) is not None:
            return find_element(elem, name)
    return None


def first_text(element: Optional[_Element]) -> Optional[str]:
    """Returns the first text segment directly inside the element, if any"""
    if element is None:
        return None
    for text in element.xpath("text()"):
        return str(text)
    return None
