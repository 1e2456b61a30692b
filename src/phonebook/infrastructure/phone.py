"""Phone number checks and display formatting. Stored text is never rewritten."""

import phonenumbers


def has_digit(raw: str | None) -> bool:
    """True if the text contains at least one digit (the minimum for a phone entry)."""
    return any(ch.isdigit() for ch in (raw or ""))


def format_phone(raw: str, default_region: str | None = None) -> str:
    """Return the international form of a valid number, or the input unchanged.

    Use default_region when numbers are typed without a leading + (e.g. "202 555 1234"
    with default_region "US"). Anything phonenumbers cannot parse or validate is
    shown exactly as stored.
    """
    if not raw or not raw.strip():
        return raw
    try:
        parsed = phonenumbers.parse(raw.strip(), default_region)
    except phonenumbers.NumberParseException:
        return raw
    if not phonenumbers.is_valid_number(parsed):
        return raw
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
