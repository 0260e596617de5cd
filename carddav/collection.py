#!/usr/bin/env python
"""
The AddressBook class represents one address book collection on the
server.  Address book objects are normally obtained through
DAVClient.addressbooks(), which runs the discovery.
"""
import logging
from typing import Any
from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

from carddav.lib import error
from carddav.lib.vcard import contact_id
from carddav.lib.vcard import vcard_text

if TYPE_CHECKING:
    from carddav.davclient import DAVClient

log = logging.getLogger("carddav")


class AddressBook:
    """
    An address book collection.

    The client is shared with the DAVClient the address book was
    discovered from; closing the client is up to the caller.  The url
    is the path of the collection relative to the server, etag and ctag
    are None if the server did not deliver them.
    """

    def __init__(
        self,
        client: "DAVClient",
        url: str,
        name: Optional[str] = None,
        etag: Optional[str] = None,
        ctag: Optional[str] = None,
    ) -> None:
        self.client = client
        self.url = url
        self.name = name
        self.etag = etag
        self.ctag = ctag

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.absolute_url)

    def __str__(self) -> str:
        return str(self.name or self.url)

    @property
    def absolute_url(self) -> str:
        return self.client.credentials.url(self.url)

    def contact_url(self, id: str) -> str:
        """The URL of the contact with the given id in this address book"""
        return self.absolute_url + id + ".vcf"

    def vcard_dump(self) -> str:
        """
        Fetches the whole collection with a depth 1 GET.  Dependent on
        the server this is either a multistatus document or the
        concatenated vCards; the body is returned as it is.
        """
        url = self.absolute_url
        response = self.client.get(url, {"Depth": "1"})
        self.client.check_status(response, url, "GET")
        return response.raw

    def create_contact(
        self, id: Optional[str], vcard: Union[str, bytes, Any]
    ) -> str:
        """
        Uploads a new contact.  The PUT is conditional (If-None-Match: *)
        so an existing contact will never be overwritten.

        Args:
          id: the resource id, the contact ends up at <id>.vcf.  If None,
            the UID of the vCard is used, or a random one.
          vcard: the vCard, as a string or a vobject component

        Returns:
          the URL of the new contact

        Raises:
          PreconditionFailedError: a contact with this id already exists
          PutError: the server refused the contact
        """
        id = contact_id(vcard, id)
        url = self.contact_url(id)
        response = self.client.put(
            url,
            vcard_text(vcard),
            {"Content-Type": "text/vcard; charset=utf-8", "If-None-Match": "*"},
        )
        if response.status == 412:
            raise error.PreconditionFailedError(
                url=url,
                reason=f"a contact with id {id} already exists",
                status=response.status,
            )
        self.client.check_status(response, url, "PUT")
        log.debug("created contact %s" % url)
        return url
