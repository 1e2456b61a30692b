"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    One entry of the phonebook.
    A Contact is immutable once created; its id is assigned by the store.
    """

    id: int
    name: str
    phone: str

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Contact id must be an integer.")
        if self.id < 0:
            raise ValueError("Contact id must be non-negative.")
