"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.application.dto import Loaded, LoadFailed, Saved, SaveFailed
from phonebook.domain import Contact


class ContactCodec(Protocol):
    """Turns a contact sequence into bytes and back."""

    def encode(self, contacts: list[Contact]) -> bytes:
        """Serialize all contacts, in order."""
        ...

    def decode(self, data: bytes) -> list[Contact]:
        """Parse contacts, skipping records that do not parse."""
        ...


class ContactRepository(Protocol):
    """Persists the whole contact sequence. Never raises on I/O failure."""

    def load(self) -> Loaded | LoadFailed:
        """Return the persisted contacts, or why they could not be read."""
        ...

    def save(self, contacts: list[Contact]) -> Saved | SaveFailed:
        """Replace the persisted contacts with the given sequence."""
        ...
