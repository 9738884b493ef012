"""Custom exception types for the relay."""
from typing import Optional, Sequence

from src.schema.errors import PayloadValidationError


class RelayError(Exception):
    status_code: int = 500

    def __init__(self, message: str, issues: Optional[Sequence[str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.issues = list(issues) if issues else None


class ConfigurationError(RelayError):
    status_code = 500

    def __init__(self, setting: str = "N8N_WEBHOOK_URL") -> None:
        super().__init__(
            f"{setting} is not configured. Set it in the relay's environment variables."
        )


class MalformedInputError(RelayError):
    status_code = 400

    def __init__(self, reason: str) -> None:
        super().__init__("Invalid JSON payload", [reason])


class GatewayError(RelayError):
    """The downstream webhook answered with a non-success status."""

    status_code = 502

    def __init__(self, downstream_status: int, body: str = "") -> None:
        super().__init__(
            f"n8n responded with status {downstream_status}", [body] if body else None,
        )
        self.downstream_status = downstream_status


class UpstreamUnavailableError(RelayError):
    """The downstream webhook could not be reached."""

    status_code = 504

    def __init__(self, reason: str) -> None:
        super().__init__("Failed to communicate with n8n webhook.", [reason])
        self.reason = reason


# Raised by the shared schema; rendered with status 422.
VALIDATION_STATUS_CODE = 422

__all__ = [
    "RelayError",
    "ConfigurationError",
    "MalformedInputError",
    "PayloadValidationError",
    "GatewayError",
    "UpstreamUnavailableError",
    "VALIDATION_STATUS_CODE",
]
