"""Compose an outbound message request and submit it to a relay."""

import asyncio

import typer
from rich.console import Console

from src.cli.output import format_error, format_issues, format_success, json_output
from src.composer import Composer, FormFields, FormState, FormStatus, RelayClient

console = Console()


async def _submit(relay_url: str, form: FormFields) -> tuple[FormState, bool]:
    """Submit the form once; returns the final state and whether the draft was valid locally."""
    async with RelayClient(relay_url) as client:
        composer = Composer(client, form)
        locally_valid = composer.can_submit
        return await composer.submit(), locally_valid


def send_command(relay_url: str, form: FormFields, json_flag: bool) -> None:
    """Submit a composed request and report the outcome."""
    state, locally_valid = asyncio.run(_submit(relay_url, form))

    if json_flag:
        json_output(
            console,
            {"status": state.status, "message": state.message, "issues": state.issues},
        )
    elif state.status is FormStatus.SUCCESS:
        format_success(console, state.message or "Sent")
    else:
        format_error(console, state.message or "Submission failed")
        format_issues(console, state.issues)

    if state.status is FormStatus.SUCCESS:
        return
    raise typer.Exit(code=2 if not locally_valid else 3)
