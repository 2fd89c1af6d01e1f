"""Categories Namespace."""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.topics import CategoryDistribution


async def get_distribution(
    client: APIClient, *, site: Site | str | None = None,
) -> list[CategoryDistribution]:
    """Article counts per category, split by site."""
    return await client.get(
        with_query(endpoints.CATEGORIES_DISTRIBUTION, {"site": site}),
        response_model=list[CategoryDistribution],
    )
