"""Date normalization for the composer's send-at field."""
from typing import Optional

from src.schema import parse_send_at


def normalize_send_at(value: Optional[str]) -> Optional[str]:
    """Normalize a typed send-at value to ISO-8601 with an explicit offset.

    Empty input means "send now" and returns None. Naive values (such as a
    ``datetime-local`` input's ``2024-01-01T12:00``) are taken as local
    time. RFC 2822 dates like ``Mon, 01 Jan 2024 12:00:00 GMT`` are
    accepted too. Unparseable text is returned unchanged so validation can
    report it.
    """
    if not value or not value.strip():
        return None
    text = value.strip()
    try:
        parsed = parse_send_at(text)
    except ValueError:
        return text
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed.isoformat(timespec="seconds")
