#!/usr/bin/env python
"""
Small helpers for the vCard payloads we PUT to the server.

The library treats vCards as opaque text; these functions only deal
with accepting the different input types (str, bytes, vobject
components) and with finding a sensible resource id.
"""
import logging
import uuid
from typing import Any
from typing import Optional
from typing import Union

import vobject

from carddav.lib.python_utilities import to_normal_str

log = logging.getLogger("carddav")


def vcard_text(data: Union[str, bytes, Any]) -> str:
    """
    Returns the vCard as a string.  data may be a string, a bytes
    object or a vobject component (vobject.vCard() or anything returned
    by vobject.readOne).
    """
    if hasattr(data, "serialize"):
        return to_normal_str(data.serialize())
    return to_normal_str(data)


def vcard_uid(data: Union[str, bytes, Any]) -> Optional[str]:
    """
    Returns the UID of the vCard, or None if there is none or the
    vCard cannot be parsed.
    """
    if hasattr(data, "serialize"):
        component = data
    else:
        try:
            component = vobject.readOne(vcard_text(data))
        except (vobject.base.ParseError, StopIteration):
            log.debug("could not parse vcard while looking for an UID", exc_info=True)
            return None
    uid = getattr(component, "uid", None)
    if uid is None or not uid.value:
        return None
    return uid.value


def contact_id(data: Union[str, bytes, Any], id: Optional[str] = None) -> str:
    """
    Picks the resource id for a new contact: the given id, else the
    UID of the vCard, else a random uuid.
    """
    if id:
        return id
    uid = vcard_uid(data)
    if uid:
        ## the id becomes part of the URL path
        return uid.replace("/", "%2F")
    return str(uuid.uuid1())
