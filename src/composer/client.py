"""HTTP client for submitting composed requests to the relay."""
from typing import Any, Optional

import httpx

TRIGGER_PATH = "/api/trigger"


class RelayClient:
    """Posts payloads to a relay's trigger endpoint. Must be used as async context manager.

    There is no retry: a failed submission is reported to the caller as is.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "RelayClient":
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Any, exc_tb: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def trigger(self, payload: dict[str, Any]) -> tuple[int, Any]:
        """Submit a payload; returns the status code and decoded JSON body (or None)."""
        if not self._client:
            raise RuntimeError("RelayClient not initialized")
        resp = await self._client.post(
            TRIGGER_PATH, json=payload, headers={"Content-Type": "application/json"},
        )
        try:
            return resp.status_code, resp.json() if resp.content else None
        except ValueError:
            return resp.status_code, None
