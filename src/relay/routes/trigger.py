"""POST /api/trigger endpoint handler."""
import json
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request, status

from src.relay.config import RelayConfig
from src.relay.errors import ConfigurationError, MalformedInputError
from src.relay.forwarder import WebhookForwarder
from src.relay.models import TriggerResponse
from src.schema import RelayedPayload, validate_request

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Workflow dispatched to n8n."


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def create_trigger_router(
    config: RelayConfig, forwarder: Optional[WebhookForwarder] = None,
) -> APIRouter:
    """Create the trigger router with injected dependencies."""
    router = APIRouter()
    if forwarder is None and config.is_configured:
        forwarder = WebhookForwarder.from_config(config)

    @router.post(
        "/api/trigger",
        response_model=TriggerResponse,
        response_model_exclude_none=True,
        status_code=status.HTTP_200_OK,
        tags=["trigger"],
    )
    async def trigger(request: Request) -> TriggerResponse:
        """Validate an outbound message request and relay it downstream once.

        Nothing is retried and nothing is stored: every valid request
        results in exactly one POST to the webhook, including repeats of
        an identical payload.
        """
        if not config.is_configured or forwarder is None:
            raise ConfigurationError("N8N_WEBHOOK_URL")

        raw = await request.body()
        try:
            body = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise MalformedInputError(str(exc)) from exc

        parsed = validate_request(body)
        payload = RelayedPayload.from_request(
            parsed,
            requested_at=utc_timestamp(),
            origin=request.headers.get("origin"),
        )

        result = await forwarder.forward(payload.to_payload())
        return TriggerResponse(message=SUCCESS_MESSAGE, n8n_response=result)

    return router
