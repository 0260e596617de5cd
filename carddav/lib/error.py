#!/usr/bin/env python
import logging
import os
from collections import defaultdict
from typing import Dict
from typing import Optional
from typing import Type

from carddav import __version__

## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_CARDDAV_DEBUGMODE")
if not debugmode:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("carddav")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from carddav.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class TransportError(DAVError):
    """
    The HTTP client failed to deliver the request or to receive a
    response (connection refused, TLS failure, timeout ...).  The
    exception from the requests library is chained as __cause__.
    """

    pass


class MalformedResponseError(DAVError):
    """
    The server response could not be parsed as XML, or an element or
    text value we depend on was missing from it.
    """

    pass


class UnexpectedStatusError(DAVError):
    """
    The server answered with a non-success HTTP status where success
    was required.  The status property contains the status code.
    """

    status: Optional[int] = None

    def __init__(
        self,
        url: Optional[str] = None,
        reason: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(url, reason)
        if status is not None:
            self.status = status


class AuthorizationError(UnexpectedStatusError):
    """
    The client encountered an HTTP 401 or 403 error and is passing it
    on to the user.  The url property will contain the url in question,
    the reason property will contain the excuse the server sent.
    """

    pass


class PropfindError(UnexpectedStatusError):
    pass


class GetError(UnexpectedStatusError):
    pass


class PutError(UnexpectedStatusError):
    pass


class PreconditionFailedError(PutError):
    """
    A conditional PUT was refused with 412, typically because a contact
    with the same id already exists in the address book.
    """

    pass


exception_by_method: Dict[str, Type[UnexpectedStatusError]] = defaultdict(
    lambda: UnexpectedStatusError
)
for method in ("propfind", "get", "put"):
    exception_by_method[method] = locals()[method[0].upper() + method[1:] + "Error"]
