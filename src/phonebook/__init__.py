"""
Phonebook core: clean-architecture layout.

- domain: the Contact entity. No outer dependencies.
- application: ContactStore (use cases), ports (ContactRepository, ContactCodec), result types.
- infrastructure: adapters (FileContactRepository, InMemoryContactRepository, codecs).
"""

from phonebook.application import (
    ContactCodec,
    ContactRepository,
    ContactStore,
    Loaded,
    LoadFailed,
    Saved,
    SaveFailed,
)
from phonebook.domain import Contact
from phonebook.infrastructure import (
    EscapedPipeCodec,
    FileContactRepository,
    InMemoryContactRepository,
    PipeDelimitedCodec,
    open_store,
)

__all__ = [
    "Contact",
    "ContactCodec",
    "ContactRepository",
    "ContactStore",
    "EscapedPipeCodec",
    "FileContactRepository",
    "InMemoryContactRepository",
    "Loaded",
    "LoadFailed",
    "PipeDelimitedCodec",
    "Saved",
    "SaveFailed",
    "open_store",
]
