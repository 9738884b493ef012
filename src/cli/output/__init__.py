"""Output formatting utilities."""

from .formatters import format_error, format_issues, format_key_value, format_success
from .json_output import json_output

__all__ = [
    "format_error",
    "format_issues",
    "format_key_value",
    "format_success",
    "json_output",
]
