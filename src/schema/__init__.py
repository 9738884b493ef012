"""Outbound message payload schema."""
from src.schema.errors import PayloadValidationError, collect_issues
from src.schema.normalize import (
    coerce_workflow_vars,
    parse_send_at,
    parse_workflow_vars,
    split_recipients,
)
from src.schema.payload import (
    ComposerDraft,
    OutboundMessageRequest,
    RelayedPayload,
    validate_draft,
    validate_request,
)

__all__ = [
    "ComposerDraft",
    "OutboundMessageRequest",
    "PayloadValidationError",
    "RelayedPayload",
    "coerce_workflow_vars",
    "collect_issues",
    "parse_send_at",
    "parse_workflow_vars",
    "split_recipients",
    "validate_draft",
    "validate_request",
]
