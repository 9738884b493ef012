"""Route handlers for the relay endpoints."""
from src.relay.routes.health import create_health_router
from src.relay.routes.trigger import create_trigger_router

__all__ = [
    "create_health_router",
    "create_trigger_router",
]
