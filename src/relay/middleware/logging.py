"""Request logging middleware."""
import logging
import time
from typing import Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger("relay.server")
SENSITIVE_FIELDS = frozenset({"authorization", "x-n8n-api-key", "api_key", "apikey"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs incoming requests without their bodies."""

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:
        start_time = time.perf_counter()
        origin = request.headers.get("origin", "-")
        logger.debug("Request: %s %s origin=%s", request.method, request.url.path, origin)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("Response: %s %s status=%d duration=%.2fms", request.method, request.url.path, response.status_code, duration_ms)
        return response


def sanitize_dict(data: dict, extra_fields: Iterable[str] = ()) -> dict:
    """Remove sensitive fields from a dictionary for logging."""
    sensitive = SENSITIVE_FIELDS | {field.lower() for field in extra_fields}
    result = {}
    for key, value in data.items():
        lower_key = key.lower()
        if lower_key in sensitive:
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = sanitize_dict(value, extra_fields)
        else:
            result[key] = value
    return result
