"""Health Namespace — backend liveness and readiness.

Invariants:
    - All probes use the short cache tier
"""

from shega_client.core import endpoints
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.health import HealthResponse, ProbeStatus


async def get_health(client: APIClient) -> HealthResponse:
    return await client.get(
        endpoints.HEALTH,
        cache_seconds=client.config.short_cache_seconds,
        response_model=HealthResponse,
    )


async def get_ready(client: APIClient) -> ProbeStatus:
    return await client.get(
        endpoints.HEALTH_READY,
        cache_seconds=client.config.short_cache_seconds,
        response_model=ProbeStatus,
    )


async def get_live(client: APIClient) -> ProbeStatus:
    return await client.get(
        endpoints.HEALTH_LIVE,
        cache_seconds=client.config.short_cache_seconds,
        response_model=ProbeStatus,
    )
