#!/usr/bin/env python
"""
Example: add a contact to the first address book of the user.

The connection is configured through CARDDAV_URL, CARDDAV_USERNAME
and CARDDAV_PASSWORD.
"""
import vobject

from carddav import get_davclient
from carddav.lib.error import PreconditionFailedError


def make_vcard(uid, full_name, email):
    card = vobject.vCard()
    card.add("uid").value = uid
    card.add("fn").value = full_name
    card.add("n").value = vobject.vcard.Name(family=full_name.split()[-1], given=full_name.split()[0])
    card.add("email").value = email
    card.email.type_param = "INTERNET"
    return card


if __name__ == "__main__":
    with get_davclient() as client:
        addressbook = client.addressbooks()[0]
        card = make_vcard("carddav-example-1", "Ada Lovelace", "ada@example.com")
        try:
            print("created", addressbook.create_contact(None, card))
        except PreconditionFailedError:
            print("the contact already exists in", addressbook.name)
