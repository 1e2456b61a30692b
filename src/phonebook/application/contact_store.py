"""Contact add, list, search, and delete. Full rewrite of storage after every mutation."""

import logging

from phonebook.application.dto import Loaded, LoadFailed, Saved, SaveFailed
from phonebook.application.ports import ContactRepository
from phonebook.domain import Contact

logger = logging.getLogger(__name__)


class ContactStore:
    """Owns the contact sequence and the id counter. Loads from the repository on construction.

    Ids are allocated monotonically and never reused, even after deletion.
    A failed save is logged and kept in ``last_save``; the in-memory change is not rolled back.
    After a failed load nothing is written, so unread storage is never overwritten.
    """

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository
        self._contacts: list[Contact] = []
        self._next_id = 1
        self.last_save: Saved | SaveFailed | None = None
        self.last_load: Loaded | LoadFailed = self._load()

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._contacts)

    def add(self, name: str, phone: str) -> Contact:
        """Create and store a contact. Name and phone are taken as given."""
        contact = Contact(id=self._next_id, name=name, phone=phone)
        self._next_id += 1
        self._contacts.append(contact)
        self.save()
        return contact

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        return list(self._contacts)

    def search(self, query: str) -> list[Contact]:
        """Return contacts whose name contains query (case-insensitive) or whose phone contains it verbatim."""
        needle = query.lower()
        return [
            contact
            for contact in self._contacts
            if needle in contact.name.lower() or query in contact.phone
        ]

    def get(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def delete(self, contact_id: int) -> bool:
        """Remove the contact with the given id. Returns True if one was removed."""
        for index, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                del self._contacts[index]
                self.save()
                return True
        return False

    def save(self) -> Saved | SaveFailed:
        """Write the full sequence to the repository and remember the outcome."""
        if isinstance(self.last_load, LoadFailed):
            result = SaveFailed(
                reason=f"Storage could not be loaded, not overwriting it ({self.last_load.reason})"
            )
        else:
            result = self._repo.save(list(self._contacts))
        if isinstance(result, SaveFailed):
            logger.warning("Could not save contacts: %s", result.reason)
        else:
            logger.info("Saved %d contacts", result.count)
        self.last_save = result
        return result

    def _load(self) -> Loaded | LoadFailed:
        result = self._repo.load()
        if isinstance(result, LoadFailed):
            logger.warning("Could not load contacts: %s", result.reason)
            return result

        seen: set[int] = set()
        for contact in result.contacts:
            if contact.id in seen:
                logger.warning("Dropping duplicate contact id %d", contact.id)
                continue
            seen.add(contact.id)
            self._contacts.append(contact)
            if contact.id >= self._next_id:
                self._next_id = contact.id + 1
        logger.info("Loaded %d contacts", len(self._contacts))
        return result
