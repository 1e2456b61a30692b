"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.codec import EscapedPipeCodec, PipeDelimitedCodec, codec_for
from phonebook.infrastructure.file_repository import FileContactRepository, open_store
from phonebook.infrastructure.memory_repository import InMemoryContactRepository
from phonebook.infrastructure.phone import format_phone, has_digit

__all__ = [
    "EscapedPipeCodec",
    "FileContactRepository",
    "InMemoryContactRepository",
    "PipeDelimitedCodec",
    "codec_for",
    "format_phone",
    "has_digit",
    "open_store",
]
