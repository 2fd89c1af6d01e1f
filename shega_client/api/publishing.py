"""Publishing Namespace — posting-time trends and yearly history.

Invariants:
    - Yearly history is a slow-changing aggregate: long tier
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.publishing import PublishingTrends, YearlyResponse


async def get_trends(
    client: APIClient, *, site: Site | str | None = None,
) -> PublishingTrends:
    return await client.get(
        with_query(endpoints.PUBLISHING_TRENDS, {"site": site}),
        response_model=PublishingTrends,
    )


async def get_yearly(
    client: APIClient, *, site: Site | str | None = None,
) -> YearlyResponse:
    return await client.get(
        with_query(endpoints.PUBLISHING_YEARLY, {"site": site}),
        cache_seconds=client.config.long_cache_seconds,
        response_model=YearlyResponse,
    )
