"""Line-oriented codecs for the phonebook file: one ``id|name|phone`` record per line.

Both codecs read and write UTF-8 with ``surrogateescape``, so bytes that are not
valid UTF-8 survive a load/save cycle unchanged. Records are joined by ``\\n``
with no trailing newline; on read, ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.
Lines that do not split into exactly three fields, or whose id is not a run of
ASCII digits, are skipped.
"""

import codecs
import logging
import re

from phonebook.domain import Contact

logger = logging.getLogger(__name__)

DELIMITER = "|"
ENCODING = "utf-8"
ERRORS = "surrogateescape"

_ID_PATTERN = re.compile(r"[0-9]+")
_UNSAFE = frozenset("|\n\r")


class _LineCodec:
    def encode(self, contacts: list[Contact]) -> bytes:
        lines = [self._format_line(contact) for contact in contacts]
        return "\n".join(lines).encode(ENCODING, ERRORS)

    def decode(self, data: bytes) -> list[Contact]:
        if data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]
        out = []
        for line_no, raw_line in enumerate(data.splitlines(), start=1):
            if not raw_line:
                continue
            fields = self._split_line(raw_line.decode(ENCODING, ERRORS))
            contact = _contact_from_fields(fields)
            if contact is None:
                logger.debug("Skipping malformed line %d", line_no)
                continue
            out.append(contact)
        return out

    def _format_line(self, contact: Contact) -> str:
        raise NotImplementedError

    def _split_line(self, line: str) -> list[str] | None:
        raise NotImplementedError


def _contact_from_fields(fields: list[str] | None) -> Contact | None:
    if fields is None or len(fields) != 3:
        return None
    id_text, name, phone = fields
    if not _ID_PATTERN.fullmatch(id_text):
        return None
    try:
        return Contact(id=int(id_text), name=name, phone=phone)
    except ValueError:
        return None


class PipeDelimitedCodec(_LineCodec):
    """Fields written verbatim. A ``|`` or line break inside a field corrupts that record."""

    def _format_line(self, contact: Contact) -> str:
        if _UNSAFE.intersection(contact.name) or _UNSAFE.intersection(contact.phone):
            logger.warning(
                "Contact %d contains a delimiter or line break and will not load back intact",
                contact.id,
            )
        return DELIMITER.join((str(contact.id), contact.name, contact.phone))

    def _split_line(self, line: str) -> list[str] | None:
        return line.split(DELIMITER)


class EscapedPipeCodec(_LineCodec):
    """Same layout, with ``\\``, ``|``, CR and LF backslash-escaped inside fields.

    A file written by PipeDelimitedCodec without backslashes reads the same here.
    """

    _ESCAPES = {"\\": "\\\\", "|": "\\|", "\n": "\\n", "\r": "\\r"}
    _UNESCAPES = {"\\": "\\", "|": "|", "n": "\n", "r": "\r"}

    def _escape(self, value: str) -> str:
        return "".join(self._ESCAPES.get(ch, ch) for ch in value)

    def _format_line(self, contact: Contact) -> str:
        return DELIMITER.join(
            (str(contact.id), self._escape(contact.name), self._escape(contact.phone))
        )

    def _split_line(self, line: str) -> list[str] | None:
        fields = []
        current = []
        chars = iter(line)
        for ch in chars:
            if ch == "\\":
                nxt = next(chars, None)
                if nxt not in self._UNESCAPES:
                    return None
                current.append(self._UNESCAPES[nxt])
            elif ch == DELIMITER:
                fields.append("".join(current))
                current = []
            else:
                current.append(ch)
        fields.append("".join(current))
        return fields


FORMATS = {
    "pipe": PipeDelimitedCodec,
    "escaped": EscapedPipeCodec,
}


def codec_for(name: str) -> PipeDelimitedCodec | EscapedPipeCodec:
    """Return a codec instance for a format name ("pipe" or "escaped")."""
    key = (name or "").strip().lower()
    if key not in FORMATS:
        raise ValueError(
            f"Unknown phonebook format {name!r}; expected one of: {', '.join(sorted(FORMATS))}."
        )
    return FORMATS[key]()
