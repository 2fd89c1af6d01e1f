"""Health Schemas — backend liveness/readiness payloads."""

from shega_client.schemas.base import APIModel


class HealthResponse(APIModel):
    status: str  # "healthy" | "degraded"
    app_name: str | None = None
    version: str | None = None
    timestamp: str | None = None
    mongodb_connected: bool | None = None
    mongodb_status: str | None = None


class ProbeStatus(APIModel):
    """Body of /health/ready and /health/live."""
    status: str
