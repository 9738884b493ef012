"""Validation-and-relay service for outbound messaging requests."""
from src.relay.app import create_app
from src.relay.config import RelayConfig, load_config_from_env
from src.relay.errors import (
    ConfigurationError,
    GatewayError,
    MalformedInputError,
    RelayError,
    UpstreamUnavailableError,
)
from src.relay.forwarder import WebhookForwarder

__all__ = [
    "create_app",
    "RelayConfig",
    "load_config_from_env",
    "RelayError",
    "ConfigurationError",
    "MalformedInputError",
    "GatewayError",
    "UpstreamUnavailableError",
    "WebhookForwarder",
]
