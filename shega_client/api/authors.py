"""Authors Namespace — rankings, sentiment profiles and per-author drill-downs.

Invariants:
    - Author names are path segments for productivity/keywords and are
      percent-encoded by the Endpoint Table
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import Granularity, Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.authors import (
    AuthorKeywords, AuthorProductivity, AuthorSentiment, AuthorWithStats,
    TopAuthor,
)


async def get_top(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> list[TopAuthor]:
    return await client.get(
        with_query(endpoints.TOP_AUTHORS, {"limit": limit, "site": site}),
        response_model=list[TopAuthor],
    )


async def get_top_with_stats(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> list[AuthorWithStats]:
    return await client.get(
        with_query(
            endpoints.TOP_AUTHORS_WITH_STATS, {"limit": limit, "site": site},
        ),
        response_model=list[AuthorWithStats],
    )


async def get_sentiment(
    client: APIClient,
    *,
    limit: int | None = None,
    site: Site | str | None = None,
    sort_by: str | None = None,
) -> list[AuthorSentiment]:
    """sort_by: polarity, subjectivity or articles."""
    return await client.get(
        with_query(
            endpoints.AUTHORS_SENTIMENT,
            {"limit": limit, "site": site, "sort_by": sort_by},
        ),
        response_model=list[AuthorSentiment],
    )


async def get_productivity(
    client: APIClient,
    author: str,
    *,
    site: Site | str | None = None,
    granularity: Granularity | str | None = None,
    days: int | None = None,
) -> AuthorProductivity:
    return await client.get(
        with_query(
            endpoints.author_productivity(author),
            {"site": site, "granularity": granularity, "days": days},
        ),
        response_model=AuthorProductivity,
    )


async def get_keywords(
    client: APIClient,
    author: str,
    *,
    site: Site | str | None = None,
    limit: int | None = None,
) -> AuthorKeywords:
    return await client.get(
        with_query(
            endpoints.author_keywords(author), {"site": site, "limit": limit},
        ),
        response_model=AuthorKeywords,
    )
