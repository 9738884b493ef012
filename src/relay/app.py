"""FastAPI application factory."""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.relay.config import RelayConfig, load_config_from_env
from src.relay.errors import VALIDATION_STATUS_CODE, RelayError
from src.relay.forwarder import WebhookForwarder
from src.relay.middleware.logging import RequestLoggingMiddleware
from src.relay.models import TriggerResponse
from src.relay.routes.health import create_health_router
from src.relay.routes.trigger import create_trigger_router
from src.schema.errors import PayloadValidationError

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def create_app(
    config: Optional[RelayConfig] = None,
    forwarder: Optional[WebhookForwarder] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    When called without arguments (e.g. via uvicorn --factory), loads
    configuration from environment variables.
    """
    if config is None:
        config = load_config_from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = FastAPI(
        title="Outbound Message Relay",
        description="Validates outbound messaging requests and relays them to an n8n webhook",
        version=APP_VERSION,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(RelayError, _relay_error_handler)
    app.add_exception_handler(PayloadValidationError, _validation_error_handler)
    app.include_router(create_trigger_router(config, forwarder))
    app.include_router(create_health_router(config))

    logger.info(
        "Relay ready, webhook=%s api_key=%s",
        "configured" if config.is_configured else "unset",
        "set" if config.api_key else "unset",
    )
    return app


async def _relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    response = TriggerResponse(message=exc.message, issues=exc.issues)
    return JSONResponse(status_code=exc.status_code, content=response.to_content())


async def _validation_error_handler(request: Request, exc: PayloadValidationError) -> JSONResponse:
    response = TriggerResponse(message="Validation failed", issues=exc.issues)
    return JSONResponse(status_code=VALIDATION_STATUS_CODE, content=response.to_content())
