"""Run the relay HTTP server."""

import uvicorn

APP_FACTORY = "src.relay.app:create_app"


def serve_command(host: str, port: int, reload: bool) -> None:
    """Start uvicorn with the relay application factory."""
    uvicorn.run(APP_FACTORY, factory=True, host=host, port=port, reload=reload)
