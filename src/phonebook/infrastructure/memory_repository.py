"""In-memory implementation of ContactRepository (no file)."""

from phonebook.application.dto import Loaded, LoadFailed, Saved, SaveFailed
from phonebook.application.ports import ContactCodec
from phonebook.domain import Contact
from phonebook.infrastructure.codec import PipeDelimitedCodec


class InMemoryContactRepository:
    """Keeps the last saved snapshot as encoded bytes, exactly as a file would hold it.
    Loading decodes the snapshot, so the codec's parsing rules still apply.
    """

    def __init__(self, data: bytes = b"", codec: ContactCodec | None = None) -> None:
        self._codec = codec if codec is not None else PipeDelimitedCodec()
        self._data = data
        self.save_count = 0

    @property
    def data(self) -> bytes:
        return self._data

    def load(self) -> Loaded | LoadFailed:
        return Loaded(contacts=self._codec.decode(self._data))

    def save(self, contacts: list[Contact]) -> Saved | SaveFailed:
        try:
            self._data = self._codec.encode(contacts)
        except UnicodeError as exc:
            return SaveFailed(reason=f"Cannot encode contacts: {exc}")
        self.save_count += 1
        return Saved(count=len(contacts))
