"""Relay configuration."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_HEADER = "X-N8N-API-KEY"


@dataclass(frozen=True)
class RelayConfig:
    """Downstream webhook settings, resolved once per process.

    ``webhook_url`` may be unset: the relay still starts and reports the
    missing configuration on every trigger request instead.
    """

    webhook_url: Optional[str] = None
    api_key: Optional[str] = None
    api_key_header: str = DEFAULT_API_KEY_HEADER
    log_level: str = "INFO"

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)


def _env(name: str) -> Optional[str]:
    """Read an environment variable, treating blank values as unset."""
    value = os.environ.get(name, "").strip()
    return value or None


def load_config_from_env() -> RelayConfig:
    webhook_url = _env("N8N_WEBHOOK_URL")
    if webhook_url is None:
        logger.warning(
            "N8N_WEBHOOK_URL is not set -- trigger requests will fail "
            "until it is configured."
        )
    return RelayConfig(
        webhook_url=webhook_url,
        api_key=_env("N8N_API_KEY"),
        api_key_header=_env("N8N_API_KEY_HEADER") or DEFAULT_API_KEY_HEADER,
        log_level=(_env("RELAY_LOG_LEVEL") or "INFO").upper(),
    )
