"""Application layer: the contact store, ports, and result types. Depends only on domain."""

from phonebook.application.contact_store import ContactStore
from phonebook.application.dto import Loaded, LoadFailed, Saved, SaveFailed
from phonebook.application.ports import ContactCodec, ContactRepository

__all__ = [
    "ContactCodec",
    "ContactRepository",
    "ContactStore",
    "Loaded",
    "LoadFailed",
    "Saved",
    "SaveFailed",
]
