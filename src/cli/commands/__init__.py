"""CLI commands."""

from . import (
    check,
    example,
    send,
    serve,
)

__all__ = [
    "check",
    "example",
    "send",
    "serve",
]
