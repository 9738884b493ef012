"""Tests for the webhook forwarder."""
import json
import logging

import httpx
import pytest

from src.relay.config import RelayConfig
from src.relay.errors import ConfigurationError, GatewayError, UpstreamUnavailableError
from src.relay.forwarder import WebhookForwarder
from tests.conftest import WEBHOOK_URL, DownstreamRecorder

PAYLOAD = {"workflowTag": "promo", "recipients": ["15551234567"], "message": "hi"}


def _forwarder(downstream: DownstreamRecorder, **kwargs) -> WebhookForwarder:
    return WebhookForwarder(WEBHOOK_URL, transport=downstream.transport, **kwargs)


class TestWebhookForwarder:
    def test_empty_url_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="N8N_WEBHOOK_URL"):
            WebhookForwarder("")

    def test_from_config(self) -> None:
        downstream = DownstreamRecorder()
        forwarder = WebhookForwarder.from_config(
            RelayConfig(webhook_url=WEBHOOK_URL, api_key="abc"), transport=downstream.transport,
        )
        assert forwarder._headers() == {"Content-Type": "application/json", "X-N8N-API-KEY": "abc"}

    @pytest.mark.asyncio
    async def test_returns_parsed_json(self) -> None:
        downstream = DownstreamRecorder(json_body={"ok": True})
        result = await _forwarder(downstream).forward(PAYLOAD)
        assert result == {"ok": True}
        assert json.loads(downstream.requests[0].content) == PAYLOAD

    @pytest.mark.asyncio
    async def test_empty_success_body_returns_none(self) -> None:
        assert await _forwarder(DownstreamRecorder(status_code=204)).forward(PAYLOAD) is None

    @pytest.mark.asyncio
    async def test_non_json_success_body_returns_none(self) -> None:
        assert await _forwarder(DownstreamRecorder(text="<html>ok</html>")).forward(PAYLOAD) is None

    @pytest.mark.asyncio
    async def test_non_success_status_raises_gateway_error(self, caplog: pytest.LogCaptureFixture) -> None:
        downstream = DownstreamRecorder(status_code=500, text="boom")
        with caplog.at_level(logging.WARNING, logger="src.relay.forwarder"):
            with pytest.raises(GatewayError) as excinfo:
                await _forwarder(downstream).forward(PAYLOAD)
        assert excinfo.value.downstream_status == 500
        assert excinfo.value.issues == ["boom"]
        assert "status 500" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_failure_raises_upstream_unavailable(self, caplog: pytest.LogCaptureFixture) -> None:
        downstream = DownstreamRecorder(error=httpx.ConnectError("Name or service not known"))
        with caplog.at_level(logging.ERROR, logger="src.relay.forwarder"):
            with pytest.raises(UpstreamUnavailableError) as excinfo:
                await _forwarder(downstream).forward(PAYLOAD)
        assert excinfo.value.issues == ["Name or service not known"]
        assert "webhook call failed" in caplog.text

    @pytest.mark.asyncio
    async def test_blank_transport_message_uses_exception_name(self) -> None:
        downstream = DownstreamRecorder(error=httpx.ReadTimeout(""))
        with pytest.raises(UpstreamUnavailableError) as excinfo:
            await _forwarder(downstream).forward(PAYLOAD)
        assert excinfo.value.reason == "ReadTimeout"

    @pytest.mark.asyncio
    async def test_never_retries(self) -> None:
        downstream = DownstreamRecorder(status_code=503, text="busy")
        with pytest.raises(GatewayError):
            await _forwarder(downstream).forward(PAYLOAD)
        assert len(downstream.requests) == 1

    @pytest.mark.asyncio
    async def test_api_key_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        downstream = DownstreamRecorder(json_body={})
        with caplog.at_level(logging.DEBUG, logger="src.relay.forwarder"):
            await _forwarder(downstream, api_key="top-secret").forward(PAYLOAD)
        assert downstream.requests[0].headers["X-N8N-API-KEY"] == "top-secret"
        assert "top-secret" not in caplog.text
        assert "[REDACTED]" in caplog.text
