"""Outbound message request models shared by the composer and the relay.

One set of field rules is defined on ``_PayloadSchema``. The two concrete
models differ only in how they read their raw input:

* ``OutboundMessageRequest`` takes the structured shape the relay receives
  (recipients as a list, workflow variables as an object).
* ``ComposerDraft`` takes the shape an operator types (recipients as one
  comma/newline separated string, workflow variables as JSON text).

Both normalize to the same field types, so anything a draft accepts the
request model accepts as well.
"""
import json
import re
from typing import Any, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from src.schema.errors import RULE_ERROR, PayloadValidationError, collect_issues
from src.schema.normalize import (
    coerce_workflow_vars,
    parse_send_at,
    parse_workflow_vars,
    split_recipients,
)

RECIPIENT_PATTERN = re.compile(r"[0-9]{6,15}")
_URL_ADAPTER = TypeAdapter(AnyUrl)


def _rule(message: str, **context: Any) -> PydanticCustomError:
    return PydanticCustomError(RULE_ERROR, message, context or None)


class _PayloadSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    workflow_tag: str
    recipients: list[str]
    message: str
    media_url: Optional[str] = None
    workflow_vars: Optional[dict[str, str]] = None
    send_at: Optional[str] = None

    @classmethod
    def _read_recipients(cls, value: Any) -> Any:
        return value

    @classmethod
    def _read_workflow_vars(cls, value: Any) -> Any:
        return value

    @field_validator("recipients", mode="before")
    @classmethod
    def _recipients_input(cls, value: Any) -> Any:
        return cls._read_recipients(value)

    @field_validator("workflow_vars", mode="before")
    @classmethod
    def _workflow_vars_input(cls, value: Any) -> Any:
        value = cls._read_workflow_vars(value)
        if value is None:
            return None
        if not isinstance(value, dict):
            raise _rule("Workflow variables must be a JSON object.")
        try:
            return coerce_workflow_vars(value)
        except RecursionError:
            raise _rule("Workflow variables are nested too deeply.") from None

    @field_validator("media_url", "send_at", mode="before")
    @classmethod
    def _blank_as_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("workflow_tag")
    @classmethod
    def validate_workflow_tag(cls, value: str) -> str:
        if not value:
            raise _rule("workflowTag is required")
        return value

    @field_validator("recipients")
    @classmethod
    def validate_recipients(cls, value: list[str]) -> list[str]:
        recipients = [entry.strip() for entry in value]
        if not recipients:
            raise _rule("Provide at least one recipient")
        invalid = [entry for entry in recipients if not RECIPIENT_PATTERN.fullmatch(entry)]
        if invalid:
            raise _rule(
                "Recipients must be numeric in international format: {invalid}",
                invalid=", ".join(repr(entry) for entry in invalid),
            )
        return recipients

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        if not value:
            raise _rule("message is required")
        return value

    @field_validator("media_url")
    @classmethod
    def validate_media_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            raise _rule("mediaUrl must be a valid URL") from None
        return value

    @field_validator("send_at")
    @classmethod
    def validate_send_at(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            parse_send_at(value)
        except ValueError:
            raise _rule("sendAt must be a valid ISO 8601 date string") from None
        return value

    def to_payload(self) -> dict[str, Any]:
        """Return the camelCase wire form, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class OutboundMessageRequest(_PayloadSchema):
    """A validated, normalized outbound message request.

    Unknown keys are dropped, which includes the server-owned
    ``requestedAt`` and ``origin`` when a caller sends them.
    """


class ComposerDraft(_PayloadSchema):
    """Operator input as typed into the composer form."""

    @classmethod
    def _read_recipients(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if not value.strip():
            raise _rule("At least one recipient is required")
        return split_recipients(value)

    @classmethod
    def _read_workflow_vars(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return parse_workflow_vars(value)
        except json.JSONDecodeError as exc:
            raise _rule("Invalid workflow variables JSON: {reason}", reason=str(exc)) from None

    def to_request(self) -> OutboundMessageRequest:
        return OutboundMessageRequest.model_validate(self.to_payload())


class RelayedPayload(OutboundMessageRequest):
    """The request as forwarded downstream, with server-observed metadata."""

    requested_at: str
    origin: Optional[str] = None

    @classmethod
    def from_request(
        cls, request: OutboundMessageRequest, requested_at: str, origin: Optional[str] = None,
    ) -> "RelayedPayload":
        return cls(**request.model_dump(), requested_at=requested_at, origin=origin)


def validate_request(data: Any) -> OutboundMessageRequest:
    """Validate the structured request shape. Raises PayloadValidationError."""
    try:
        return OutboundMessageRequest.model_validate(data)
    except ValidationError as exc:
        raise PayloadValidationError(collect_issues(exc)) from exc


def validate_draft(data: Any) -> OutboundMessageRequest:
    """Validate raw composer input and return the normalized request."""
    try:
        return ComposerDraft.model_validate(data).to_request()
    except ValidationError as exc:
        raise PayloadValidationError(collect_issues(exc)) from exc
