"""Result types for the persistence round-trip."""

from dataclasses import dataclass, field

from phonebook.domain import Contact


# --- load results ---


@dataclass(frozen=True)
class Loaded:
    """Backing storage was read. Missing storage loads as an empty book."""

    contacts: list[Contact] = field(default_factory=list)


@dataclass(frozen=True)
class LoadFailed:
    """Backing storage exists but could not be read."""

    reason: str


# --- save results ---


@dataclass(frozen=True)
class Saved:
    """The full contact sequence was written."""

    count: int


@dataclass(frozen=True)
class SaveFailed:
    """The write did not happen. In-memory state is ahead of storage."""

    reason: str
