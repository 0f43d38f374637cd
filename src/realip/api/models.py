"""Pydantic models for the API."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"


class ClientIPResponse(BaseModel):
    """Client address as seen after the real-IP middleware ran."""

    ip: str = Field(description="Trusted client address, or the peer address")
    x_real_ip: str | None = Field(
        default=None, description="X-Real-Ip header forwarded to the app"
    )
    x_forwarded_for: str | None = Field(
        default=None, description="X-Forwarded-For header forwarded to the app"
    )
    providers: list[str] = Field(
        default_factory=list, description="Providers consulted for this request"
    )
    preferred_provider: str | None = Field(
        default=None, description="Provider whose address wins when present"
    )
