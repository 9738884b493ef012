"""Operator-side composer for outbound message requests."""
from src.composer.client import RelayClient
from src.composer.dates import normalize_send_at
from src.composer.form import (
    Composer,
    FormFields,
    FormState,
    FormStatus,
    WorkflowVarsError,
)

__all__ = [
    "Composer",
    "FormFields",
    "FormState",
    "FormStatus",
    "RelayClient",
    "WorkflowVarsError",
    "normalize_send_at",
]
