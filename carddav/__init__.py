#!/usr/bin/env python
import logging

__version__ = "0.3.0"

from .collection import AddressBook
from .davclient import Credentials
from .davclient import DAVClient
from .davclient import get_davclient

# Silence notification of no default logging handler
log = logging.getLogger("carddav")
log.addHandler(logging.NullHandler())

__all__ = ["__version__", "AddressBook", "Credentials", "DAVClient", "get_davclient"]
