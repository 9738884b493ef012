"""CLI utilities."""

from .form_options import build_form

__all__ = [
    "build_form",
]
