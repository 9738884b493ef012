"""GET /api/health endpoint handler."""
from fastapi import APIRouter, status

from src.relay.config import RelayConfig
from src.relay.models import HealthResponse
from src.relay.routes.trigger import utc_timestamp


def create_health_router(config: RelayConfig) -> APIRouter:
    """Create health router with injected dependencies."""
    router = APIRouter()

    @router.get("/api/health", response_model=HealthResponse, status_code=status.HTTP_200_OK, tags=["status"])
    async def health_check() -> HealthResponse:
        """Report whether the relay can forward requests.

        The webhook is never contacted; only the configuration is checked.
        """
        return HealthResponse(
            status="ok" if config.is_configured else "unconfigured",
            webhook_configured=config.is_configured,
            timestamp=utc_timestamp(),
        )

    return router
