#!/usr/bin/env python
from typing import Dict
from typing import Optional

nsmap: Dict[str, str] = {
    "d": "DAV:",
    "c": "urn:ietf:params:xml:ns:carddav",
}

## getctag is not part of any RFC, it lives in the calendarserver
## namespace.  Servers tend to deliver it, but it's not declared in
## the request bodies.
nsmap2: Dict[str, str] = nsmap.copy()
nsmap2["cs"] = "http://calendarserver.org/ns/"


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap2[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name
