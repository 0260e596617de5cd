#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from carddav.lib.namespace import ns


# Properties
class AddressbookHomeSet(BaseElement):
    tag: ClassVar[str] = ns("c", "addressbook-home-set")


## Not a CardDAV property, but commonly delivered by servers
class GetCTag(BaseElement):
    tag: ClassVar[str] = ns("cs", "getctag")
