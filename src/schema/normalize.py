"""Normalization helpers for raw composer input."""
import json
import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Mapping

RECIPIENT_SEPARATOR = re.compile(r"[\n,]+")


def split_recipients(text: str) -> list[str]:
    """Split comma or newline separated recipients, dropping empty entries."""
    return [entry.strip() for entry in RECIPIENT_SEPARATOR.split(text) if entry.strip()]


def parse_workflow_vars(text: str) -> Any:
    """Parse the free-form workflow variables JSON text.

    Blank text means no variables and returns None. Raises
    json.JSONDecodeError when the text is not valid JSON. The shape of the
    result is not checked here.
    """
    if not text or not text.strip():
        return None
    return json.loads(text)


def stringify_value(value: Any) -> str:
    """Render a workflow variable value as a string.

    Strings pass through; everything else is rendered as compact JSON so
    ``True`` becomes ``true`` and ``None`` becomes ``null``.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), default=str)


def coerce_workflow_vars(variables: Mapping[Any, Any]) -> dict[str, str]:
    """Coerce every key and value of a workflow variables mapping to str."""
    return {str(key): stringify_value(value) for key, value in variables.items()}


def parse_send_at(text: str) -> datetime:
    """Parse a send-at value as ISO 8601 or as an RFC 2822 date.

    The RFC 2822 form covers HTTP-style dates such as
    ``Mon, 01 Jan 2024 12:00:00 GMT``. Raises ValueError when neither
    parses. The result may be naive.
    """
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"not a date/time: {text!r}") from None
