"""Build composer form fields from CLI options."""
from typing import Optional

from src.composer import FormFields


def build_form(
    workflow_tag: str,
    recipients: list[str],
    message: str,
    media_url: Optional[str] = None,
    send_at: Optional[str] = None,
    workflow_vars: Optional[str] = None,
) -> FormFields:
    """Join repeated ``--recipients`` options into the form's raw text.

    Each option may itself hold comma or newline separated numbers.
    """
    return FormFields(
        workflow_tag=workflow_tag,
        recipients="\n".join(recipients),
        message=message,
        media_url=media_url or "",
        send_at=send_at or "",
        workflow_vars=workflow_vars or "",
    )
