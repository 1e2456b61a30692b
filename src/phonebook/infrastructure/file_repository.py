"""File-backed implementation of ContactRepository (full rewrite on every save)."""

import contextlib
import logging
import os
import shutil
from pathlib import Path

from phonebook.application.contact_store import ContactStore
from phonebook.application.dto import Loaded, LoadFailed, Saved, SaveFailed
from phonebook.application.ports import ContactCodec
from phonebook.config import get_config
from phonebook.domain import Contact
from phonebook.infrastructure.codec import PipeDelimitedCodec, codec_for

logger = logging.getLogger(__name__)


class FileContactRepository:
    """Stores contacts in a single text file.
    A missing file loads as an empty phonebook. Writes go to a sibling ``.tmp`` file
    that is then moved over the target, so readers never see a half-written file.
    A symlinked path is written through to its target, and an existing file keeps its mode.
    """

    def __init__(self, path: str | os.PathLike, codec: ContactCodec | None = None) -> None:
        self._path = Path(path)
        self._codec = codec if codec is not None else PipeDelimitedCodec()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Loaded | LoadFailed:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("No phonebook file at %s, starting empty", self._path)
            return Loaded()
        except OSError as exc:
            return LoadFailed(reason=str(exc))
        return Loaded(contacts=self._codec.decode(data))

    def save(self, contacts: list[Contact]) -> Saved | SaveFailed:
        try:
            data = self._codec.encode(contacts)
        except UnicodeError as exc:
            return SaveFailed(reason=f"Cannot encode contacts: {exc}")

        target = Path(os.path.realpath(self._path))
        tmp_path = target.with_name(target.name + ".tmp")
        try:
            tmp_path.write_bytes(data)
            if target.exists():
                shutil.copymode(target, tmp_path)
            os.replace(tmp_path, target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            return SaveFailed(reason=str(exc))
        return Saved(count=len(contacts))


def open_store(
    path: str | os.PathLike | None = None,
    codec: ContactCodec | None = None,
) -> ContactStore:
    """Build a ContactStore over a file. Path and codec default to the PHONEBOOK_* configuration."""
    if path is None or codec is None:
        config = get_config()
        path = config.file if path is None else path
        codec = codec_for(config.format) if codec is None else codec
    return ContactStore(FileContactRepository(path, codec))
