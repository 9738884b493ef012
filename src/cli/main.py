"""Main CLI entry point for the outbound message relay."""

from typing import List, Optional

import typer
from rich.console import Console

from src.cli.commands.check import check_command
from src.cli.commands.example import example_command
from src.cli.commands.send import send_command
from src.cli.commands.serve import serve_command
from src.cli.utils import build_form
from src.composer import FormFields

app = typer.Typer(
    name="relay",
    help="Outbound message relay - validate and forward messaging requests to n8n",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()

DEFAULT_RELAY_URL = "http://localhost:8000"
DEFAULT_WORKFLOW_TAG = FormFields().workflow_tag


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "-p", "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the relay server (reads N8N_WEBHOOK_URL and N8N_API_KEY)."""
    serve_command(host, port, reload)


@app.command("send")
def send(
    recipients: List[str] = typer.Option(..., "-r", "--recipients", help="Numbers, comma separated or repeated"),
    message: str = typer.Option(..., "-m", "--message", help="Message template"),
    workflow_tag: str = typer.Option(DEFAULT_WORKFLOW_TAG, "-w", "--workflow-tag", help="Workflow tag"),
    media_url: Optional[str] = typer.Option(None, "--media-url", help="Media attachment URL"),
    send_at: Optional[str] = typer.Option(None, "--send-at", help="ISO 8601 send time"),
    workflow_vars: Optional[str] = typer.Option(None, "--vars", help="Workflow variables as a JSON object"),
    relay_url: str = typer.Option(DEFAULT_RELAY_URL, "-u", "--relay-url", envvar="RELAY_URL", help="Relay base URL"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compose a request and submit it to the relay."""
    form = build_form(workflow_tag, recipients, message, media_url, send_at, workflow_vars)
    send_command(relay_url, form, json_flag)


@app.command("check")
def check(
    recipients: List[str] = typer.Option(..., "-r", "--recipients", help="Numbers, comma separated or repeated"),
    message: str = typer.Option(..., "-m", "--message", help="Message template"),
    workflow_tag: str = typer.Option(DEFAULT_WORKFLOW_TAG, "-w", "--workflow-tag", help="Workflow tag"),
    media_url: Optional[str] = typer.Option(None, "--media-url", help="Media attachment URL"),
    send_at: Optional[str] = typer.Option(None, "--send-at", help="ISO 8601 send time"),
    workflow_vars: Optional[str] = typer.Option(None, "--vars", help="Workflow variables as a JSON object"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Validate a request locally without sending it."""
    form = build_form(workflow_tag, recipients, message, media_url, send_at, workflow_vars)
    check_command(form, json_flag)


@app.command("example")
def example(
    relay_url: str = typer.Option(DEFAULT_RELAY_URL, "-u", "--relay-url", envvar="RELAY_URL", help="Relay base URL"),
    workflow_tag: str = typer.Option(DEFAULT_WORKFLOW_TAG, "-w", "--workflow-tag", help="Workflow tag"),
) -> None:
    """Print a curl command for calling the relay."""
    example_command(relay_url, workflow_tag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)
