"""Single-shot forwarding of relayed payloads to the downstream webhook."""
import logging
from typing import Any, Optional

import httpx

from src.relay.config import DEFAULT_API_KEY_HEADER, RelayConfig
from src.relay.errors import ConfigurationError, GatewayError, UpstreamUnavailableError
from src.relay.middleware.logging import sanitize_dict

logger = logging.getLogger(__name__)


class WebhookForwarder:
    """POSTs one payload to the configured webhook. Never retries.

    No timeout is set here, so the httpx default applies. ``transport`` is
    passed straight to ``httpx.AsyncClient`` and exists for tests and
    custom network stacks.
    """

    def __init__(
        self,
        url: str,
        api_key: Optional[str] = None,
        api_key_header: str = DEFAULT_API_KEY_HEADER,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not url:
            raise ConfigurationError()
        self._url = url
        self._api_key = api_key
        self._api_key_header = api_key_header
        self._transport = transport

    @classmethod
    def from_config(
        cls, config: RelayConfig, transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "WebhookForwarder":
        return cls(
            url=config.webhook_url or "",
            api_key=config.api_key,
            api_key_header=config.api_key_header,
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers[self._api_key_header] = self._api_key
        return headers

    async def forward(self, payload: dict[str, Any]) -> Any:
        """Send ``payload`` and return the downstream JSON body, if any.

        Raises GatewayError for a non-2xx answer and UpstreamUnavailableError
        when the request itself fails.
        """
        logger.debug(
            "Forwarding to %s headers=%s",
            self._url,
            sanitize_dict(self._headers(), extra_fields=(self._api_key_header,)),
        )
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self._url, json=payload, headers=self._headers())
        except Exception as exc:
            logger.error("[n8n] webhook call failed: %r", exc)
            raise UpstreamUnavailableError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            body = _safe_text(response)
            logger.warning(
                "[n8n] webhook responded with status %d", response.status_code,
            )
            raise GatewayError(response.status_code, body)
        return _safe_json(response)


def _safe_text(response: httpx.Response) -> str:
    try:
        return response.text
    except UnicodeDecodeError:
        return ""


def _safe_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
