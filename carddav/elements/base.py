#!/usr/bin/env python
import sys
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from carddav.lib.namespace import nsmap
from carddav.lib.python_utilities import to_unicode

if sys.version_info < (3, 9):
    from typing import Iterable
else:
    from collections.abc import Iterable

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    children: Optional[List[Self]] = None
    tag: ClassVar[Optional[str]] = None
    value: Optional[str] = None

    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        self.children = []
        self.value = to_unicode(value)

    def __add__(
        self, other: Union["BaseElement", Iterable["BaseElement"]]
    ) -> "BaseElement":
        return self.append(other)

    def __str__(self) -> str:
        utf8 = etree.tostring(self.xmlelement(), encoding="utf-8")
        return str(utf8, "utf-8")

    def xmlelement(self) -> _Element:
        if self.tag is None:
            raise ValueError("Unexpected value None for self.tag")

        ## namespaces are declared on the root element only
        root = etree.Element(self.tag, nsmap=nsmap)
        if self.value is not None:
            root.text = self.value

        self.xmlchildren(root)
        return root

    def xmlchildren(self, root: _Element) -> None:
        for c in self.children:
            child = etree.SubElement(root, c.tag)
            if c.value is not None:
                child.text = c.value
            c.xmlchildren(child)

    def append(self, element: Union[Self, Iterable[Self]]) -> Self:
        if isinstance(element, Iterable):
            self.children.extend(element)
        else:
            self.children.append(element)

        return self
