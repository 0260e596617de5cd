#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from carddav.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("d", "propfind")


# Components / Data
class Prop(BaseElement):
    tag: ClassVar[str] = ns("d", "prop")


class Response(BaseElement):
    tag: ClassVar[str] = ns("d", "response")


class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("d", "multistatus")


# Properties
class DisplayName(BaseElement):
    tag: ClassVar[str] = ns("d", "displayname")


class GetEtag(BaseElement):
    tag: ClassVar[str] = ns("d", "getetag")


class Href(BaseElement):
    tag: ClassVar[str] = ns("d", "href")


class CurrentUserPrincipal(BaseElement):
    tag: ClassVar[str] = ns("d", "current-user-principal")
