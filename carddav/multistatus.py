"""
Pure functions for parsing the multistatus responses delivered by a
CardDAV server during discovery.

All functions in this module are pure - they take XML bytes in and
return structured data out, with no side effects or I/O.  Whenever an
element we depend on is missing, MalformedResponseError is raised.
"""
import logging
from dataclasses import dataclass
from typing import List
from typing import Optional
from typing import Union
from urllib.parse import urlparse

from lxml import etree
from lxml.etree import _Element

from carddav.elements import cdav
from carddav.elements import dav
from carddav.lib import error
from carddav.lib.tree import children
from carddav.lib.tree import find_child
from carddav.lib.tree import find_element
from carddav.lib.tree import first_text
from carddav.lib.tree import local_name

log = logging.getLogger("carddav")


@dataclass(frozen=True)
class AddressBookInfo:
    """
    One address book collection as found in a depth 1 PROPFIND
    response on the address book home set.

    Attributes:
        href: path of the collection, relative to the server
        display_name: the displayname property
        etag: the getetag property, None if the server did not send it
        ctag: the getctag property, None if the server did not send it
    """

    href: str
    display_name: str
    etag: Optional[str] = None
    ctag: Optional[str] = None


def parse_xml(body: Union[str, bytes, None], huge_tree: bool = False) -> _Element:
    """
    Parse a response body into an lxml tree.

    Raises:
        MalformedResponseError: If the body is empty or not valid XML
    """
    if not body:
        raise error.MalformedResponseError(reason="Empty response, expected XML")
    if isinstance(body, str):
        body = body.encode("utf-8")
    try:
        return etree.XML(
            body,
            parser=etree.XMLParser(remove_blank_text=True, huge_tree=huge_tree),
        )
    except etree.XMLSyntaxError as e:
        raise error.MalformedResponseError(reason=f"Invalid XML: {e}") from e


def _to_tree(body: Union[str, bytes, _Element]) -> _Element:
    if isinstance(body, etree._Element):
        return body
    return parse_xml(body)


def _normalize_href(href: str) -> str:
    """
    Some servers give absolute URLs rather than paths.  Everything
    downstream expects a path relative to the server.
    """
    href = href.strip()
    if "://" in href:
        return urlparse(href).path
    return href


def parse_single_property(body: Union[str, bytes, _Element], property_name: str) -> str:
    """
    Extract the href of a property like current-user-principal or
    addressbook-home-set from a depth 0 PROPFIND response.

    The property is located anywhere along the first nested path of
    the response, then the href below it, then the first text segment
    of the href.

    Args:
        body: Raw XML response (or an already parsed tree)
        property_name: local name of the property, i.e. "current-user-principal"

    Returns:
        The href text

    Raises:
        MalformedResponseError: If the property, the href or the text is missing
    """
    tree = _to_tree(body)
    prop = find_element(tree, property_name)
    if prop is None:
        raise error.MalformedResponseError(
            reason=f"No {property_name} element found in response"
        )
    href = find_element(prop, local_name(dav.Href.tag))
    if href is None:
        raise error.MalformedResponseError(
            reason=f"No href found below {property_name}"
        )
    text = first_text(href)
    if not text or not text.strip():
        raise error.MalformedResponseError(
            reason=f"Empty href found below {property_name}"
        )
    return _normalize_href(text)


def _optional_text(prop: _Element, name: str) -> Optional[str]:
    elem = find_child(prop, name)
    if elem is None:
        return None
    return first_text(elem) or ""


def _parse_addressbook_response(response: _Element) -> AddressBookInfo:
    prop = find_element(response, local_name(dav.Prop.tag))
    if prop is None:
        raise error.MalformedResponseError(reason="No prop element found in response")

    ## The href belongs to the response element, not to the prop
    href = first_text(find_child(response, local_name(dav.Href.tag)))
    if not href or not href.strip():
        raise error.MalformedResponseError(reason="No href found in response")

    display_name = first_text(find_child(prop, local_name(dav.DisplayName.tag)))
    if not display_name:
        raise error.MalformedResponseError(
            reason=f"No displayname found for {href}"
        )

    return AddressBookInfo(
        href=_normalize_href(href),
        display_name=display_name,
        etag=_optional_text(prop, local_name(dav.GetEtag.tag)),
        ctag=_optional_text(prop, local_name(cdav.GetCTag.tag)),
    )


def parse_addressbooks(body: Union[str, bytes, _Element]) -> List[AddressBookInfo]:
    """
    Parse the depth 1 PROPFIND response on an address book home set.

    The first response in the multistatus describes the home set
    collection itself and is skipped; every following response is an
    address book.  One malformed response makes the whole call fail.

    Args:
        body: Raw XML response (or an already parsed tree)

    Returns:
        List of AddressBookInfo, in document order

    Raises:
        MalformedResponseError: If the body is not XML, or a response
            lacks prop, href or displayname
    """
    tree = _to_tree(body)
    if local_name(tree) != local_name(dav.MultiStatus.tag):
        error.weirdness("expected a multistatus, got", tree)

    books = []
    for response in list(children(tree))[1:]:
        if local_name(response) != local_name(dav.Response.tag):
            error.weirdness("unexpected element found in multistatus", response)
        book = _parse_addressbook_response(response)
        log.debug("found address book %s at %s", book.display_name, book.href)
        books.append(book)
    return books
