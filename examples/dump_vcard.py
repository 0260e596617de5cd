#!/usr/bin/env python
"""
Example: print every contact of every address book of the user.

Credentials are taken from the command line parameters here, but
get_davclient() may also pick them up from the environment variables
CARDDAV_URL, CARDDAV_USERNAME and CARDDAV_PASSWORD or from a
config file (~/.config/carddav/contacts.conf).
"""
import sys

from carddav import get_davclient


def dump_all(client):
    for addressbook in client.addressbooks():
        print(f"=== {addressbook.name} ({addressbook.url})")
        print(addressbook.vcard_dump())


if __name__ == "__main__":
    if len(sys.argv) == 4:
        client = get_davclient(
            url=sys.argv[1], username=sys.argv[2], password=sys.argv[3]
        )
    else:
        client = get_davclient()
    if client is None:
        sys.exit(f"usage: {sys.argv[0]} url username password")
    with client:
        dump_all(client)
