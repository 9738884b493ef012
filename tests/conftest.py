"""Pytest fixtures for relay and composer tests."""
from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from src.relay.app import create_app
from src.relay.config import RelayConfig
from src.relay.forwarder import WebhookForwarder

WEBHOOK_URL = "https://n8n.example.com/webhook/whatsapp"


class DownstreamRecorder:
    """Stands in for the n8n webhook and records every request it receives."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def build_app(config: RelayConfig, downstream: DownstreamRecorder):
    forwarder = None
    if config.is_configured:
        forwarder = WebhookForwarder.from_config(config, transport=downstream.transport)
    return create_app(config, forwarder)


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(webhook_url=WEBHOOK_URL)


@pytest.fixture
def downstream() -> DownstreamRecorder:
    return DownstreamRecorder(json_body={"executionId": "42"})


@pytest.fixture
def client(relay_config: RelayConfig, downstream: DownstreamRecorder) -> TestClient:
    with TestClient(build_app(relay_config, downstream)) as c:
        yield c


@pytest.fixture
def valid_payload() -> dict:
    return {"workflowTag": "promo", "recipients": ["15551234567"], "message": "hi"}
