"""Validate a composed request locally without sending it."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_issues, format_key_value, format_success, json_output
from src.composer import Composer, FormFields, WorkflowVarsError
from src.schema import PayloadValidationError

console = Console()


def check_command(form: FormFields, json_flag: bool) -> None:
    """Run the composer's validation and print the normalized payload."""
    composer = Composer(form=form)
    try:
        payload = composer.build_request().to_payload()
    except WorkflowVarsError as e:
        issues = [str(e)]
    except PayloadValidationError as e:
        issues = e.issues
    else:
        if json_flag:
            json_output(console, {"valid": True, "payload": payload})
        else:
            format_success(console, "Request is valid")
            format_key_value(console, payload)
        return

    if json_flag:
        json_output(console, {"valid": False, "issues": issues})
    else:
        format_error(console, "Fix the highlighted issues.")
        format_issues(console, issues)
    raise typer.Exit(code=2)
