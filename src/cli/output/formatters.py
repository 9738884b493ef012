"""Rich terminal output formatters."""

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape


def format_success(console: Console, message: str) -> None:
    """Display success message in green."""
    console.print(f"[green]{escape(message)}[/green]")


def format_error(console: Console, message: str) -> None:
    """Display error message in red."""
    console.print(f"[red]Error:[/red] {escape(message)}")


def format_issues(console: Console, issues: Sequence[str]) -> None:
    """Display validation or relay issues as a bulleted list."""
    for issue in issues:
        console.print(f"  [red]-[/red] {escape(issue)}", highlight=False)


def format_key_value(console: Console, data: dict[str, Any]) -> None:
    """Display key-value pairs."""
    max_key_len = max(len(k) for k in data.keys()) if data else 0
    for key, value in data.items():
        console.print(f"[cyan]{key.ljust(max_key_len)}[/cyan]: {escape(str(value))}")
