"""Print a curl invocation for calling the relay from other systems."""

import json

from rich.console import Console

from src.composer.client import TRIGGER_PATH

console = Console()


def render_curl(relay_url: str, workflow_tag: str) -> str:
    body = json.dumps(
        {
            "workflowTag": workflow_tag,
            "recipients": ["15551234567"],
            "message": "Hello from n8n",
            "sendAt": "2024-01-01T12:00:00.000Z",
        },
        indent=2,
    )
    indented = "\n".join("  " + line if i else line for i, line in enumerate(body.splitlines()))
    endpoint = relay_url.rstrip("/") + TRIGGER_PATH
    return (
        f'curl -X POST "{endpoint}" \\\n'
        '  -H "Content-Type: application/json" \\\n'
        f"  -d '{indented}'"
    )


def example_command(relay_url: str, workflow_tag: str) -> None:
    """Print an example request for the relay."""
    console.print(render_curl(relay_url, workflow_tag), markup=False, highlight=False, soft_wrap=True)
