"""Operator-facing composer form.

The composer owns the raw field values an operator edits and the
submission lifecycle::

    idle -> submitting -> success | error -> idle (on the next submit)

Edits never trigger validation; only ``can_submit`` is derived from the
current draft. Submissions are never retried.
"""
import json
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Optional

from src.composer.client import RelayClient
from src.composer.dates import normalize_send_at
from src.schema import (
    OutboundMessageRequest,
    PayloadValidationError,
    coerce_workflow_vars,
    parse_workflow_vars,
    validate_draft,
)

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Hello from your n8n automation! Replace this text with a personalized message."
DEFAULT_SUCCESS_MESSAGE = (
    "n8n workflow triggered successfully. Check your n8n execution log for details."
)
FIX_ISSUES_MESSAGE = "Fix the highlighted issues."
NETWORK_ERROR_MESSAGE = "Unexpected network error. Try again."


class FormStatus(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FormState:
    status: FormStatus
    message: Optional[str] = None
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class FormFields:
    """Raw field values exactly as typed."""

    workflow_tag: str = "whatsapp-broadcast"
    recipients: str = "15551234567"
    message: str = DEFAULT_MESSAGE
    media_url: str = ""
    send_at: str = ""
    workflow_vars: str = json.dumps({"source": "web-portal"}, indent=2)


FIELD_NAMES = frozenset(f.name for f in fields(FormFields))


class WorkflowVarsError(ValueError):
    """The workflow variables text is not a JSON object."""


class Composer:
    """Form state machine bound to a relay client.

    ``client`` may be omitted when the composer is only used to validate
    drafts; ``submit`` requires it.
    """

    def __init__(self, client: Optional[RelayClient] = None, form: Optional[FormFields] = None) -> None:
        self._client = client
        self._fields = form or FormFields()
        self._state = FormState(FormStatus.IDLE)

    @property
    def fields(self) -> FormFields:
        return self._fields

    @property
    def state(self) -> FormState:
        return self._state

    def update(self, field: str, value: str) -> None:
        """Edit one raw field. Does not validate."""
        if field not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {field}")
        self._fields = replace(self._fields, **{field: value})

    def reset(self) -> None:
        self._state = FormState(FormStatus.IDLE)

    def _read_workflow_vars(self) -> Optional[dict[str, str]]:
        try:
            value = parse_workflow_vars(self._fields.workflow_vars)
        except json.JSONDecodeError as exc:
            raise WorkflowVarsError(f"Invalid workflow variables JSON: {exc}") from exc
        if value is None:
            return None
        if not isinstance(value, dict):
            raise WorkflowVarsError("Workflow variables must be a JSON object.")
        return coerce_workflow_vars(value)

    def _draft(self, workflow_vars: Optional[dict[str, str]], send_at: Optional[str]) -> dict[str, Any]:
        return {
            "workflowTag": self._fields.workflow_tag,
            "recipients": self._fields.recipients,
            "message": self._fields.message,
            "mediaUrl": self._fields.media_url,
            "sendAt": send_at,
            "workflowVars": workflow_vars,
        }

    @property
    def can_submit(self) -> bool:
        """Whether the current draft would pass local validation."""
        if self._state.status is FormStatus.SUBMITTING:
            return False
        try:
            validate_draft(self._draft(self._read_workflow_vars(), self._fields.send_at))
        except (WorkflowVarsError, PayloadValidationError):
            return False
        return True

    def build_request(self) -> OutboundMessageRequest:
        """Normalize and validate the draft.

        Raises WorkflowVarsError or PayloadValidationError.
        """
        workflow_vars = self._read_workflow_vars()
        return validate_draft(self._draft(workflow_vars, normalize_send_at(self._fields.send_at)))

    async def submit(self) -> FormState:
        """Validate the draft and submit it to the relay once."""
        if self._client is None:
            raise RuntimeError("Composer has no relay client")
        self._state = FormState(FormStatus.IDLE)
        try:
            request = self.build_request()
        except WorkflowVarsError as exc:
            return self._finish(FormState(FormStatus.ERROR, str(exc)))
        except PayloadValidationError as exc:
            return self._finish(FormState(FormStatus.ERROR, FIX_ISSUES_MESSAGE, tuple(exc.issues)))

        self._state = FormState(FormStatus.SUBMITTING)
        try:
            status_code, body = await self._client.trigger(request.to_payload())
        except Exception as exc:
            logger.error("Submission to relay failed: %s", exc)
            return self._finish(FormState(FormStatus.ERROR, str(exc) or NETWORK_ERROR_MESSAGE))

        details = body if isinstance(body, dict) else {}
        message = details.get("message")
        if not 200 <= status_code < 300:
            issues = details.get("issues")
            return self._finish(FormState(
                FormStatus.ERROR,
                message if isinstance(message, str) else f"Request failed with status {status_code}.",
                tuple(str(issue) for issue in issues) if isinstance(issues, list) else (),
            ))
        return self._finish(FormState(
            FormStatus.SUCCESS,
            message if isinstance(message, str) else DEFAULT_SUCCESS_MESSAGE,
        ))

    def _finish(self, state: FormState) -> FormState:
        self._state = state
        return state
