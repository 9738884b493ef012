"""Validation issue collection for the payload schema."""
from typing import Sequence

from pydantic import ValidationError

# Error type used by every rule of the payload schema. Messages raised with
# it are complete sentences and are surfaced verbatim.
RULE_ERROR = "payload_rule"


class PayloadValidationError(ValueError):
    """A payload failed schema validation.

    ``issues`` holds every violation in field order.
    """

    def __init__(self, issues: Sequence[str]) -> None:
        super().__init__("; ".join(issues))
        self.issues = list(issues)


def collect_issues(exc: ValidationError) -> list[str]:
    """Turn a pydantic ValidationError into human-readable issue messages."""
    issues: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        location = ".".join(str(part) for part in loc)
        if error["type"] == RULE_ERROR:
            issues.append(error["msg"])
        elif not loc:
            issues.append("Payload must be a JSON object")
        elif error["type"] == "missing":
            issues.append(f"{location} is required")
        else:
            issues.append(f"{location}: {error['msg']}")
    return issues
