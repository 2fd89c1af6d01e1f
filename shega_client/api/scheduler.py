"""Scheduler Namespace — periodic pipeline status and manual trigger.

Invariants:
    - All calls use the short tier
    - trigger sends POST without a body
"""

from shega_client.core import endpoints
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.operations import (
    SchedulerHealth, SchedulerStatus, SchedulerTriggerResponse,
)


async def get_status(client: APIClient) -> SchedulerStatus:
    return await client.get(
        endpoints.SCHEDULER_STATUS,
        cache_seconds=client.config.short_cache_seconds,
        response_model=SchedulerStatus,
    )


async def trigger(client: APIClient) -> SchedulerTriggerResponse:
    return await client.post(
        endpoints.SCHEDULER_TRIGGER,
        cache_seconds=client.config.short_cache_seconds,
        response_model=SchedulerTriggerResponse,
    )


async def get_health(client: APIClient) -> SchedulerHealth:
    return await client.get(
        endpoints.SCHEDULER_HEALTH,
        cache_seconds=client.config.short_cache_seconds,
        response_model=SchedulerHealth,
    )
