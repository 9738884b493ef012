"""Response models for the relay endpoints."""
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class TriggerResponse(BaseModel):
    """Envelope returned by ``POST /api/trigger`` for every outcome."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field()]
    issues: Optional[list[str]] = None
    n8n_response: Optional[Any] = Field(default=None, alias="n8nResponse")

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Annotated[Literal["ok", "unconfigured"], Field()]
    webhook_configured: bool = Field(alias="webhookConfigured")
    timestamp: Annotated[str, Field()]
