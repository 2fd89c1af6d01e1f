"""Sentiment Namespace — monthly timeline and most positive/negative articles."""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.sentiment import (
    SentimentTimelineItem, TopSentimentResponse,
)


async def get_timeline(
    client: APIClient, *, months: int | None = None, site: Site | str | None = None,
) -> list[SentimentTimelineItem]:
    return await client.get(
        with_query(endpoints.SENTIMENT_TIMELINE, {"months": months, "site": site}),
        response_model=list[SentimentTimelineItem],
    )


async def get_top_positive(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> TopSentimentResponse:
    return await client.get(
        with_query(
            endpoints.SENTIMENT_TOP_POSITIVE, {"limit": limit, "site": site},
        ),
        response_model=TopSentimentResponse,
    )


async def get_top_negative(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> TopSentimentResponse:
    return await client.get(
        with_query(
            endpoints.SENTIMENT_TOP_NEGATIVE, {"limit": limit, "site": site},
        ),
        response_model=TopSentimentResponse,
    )
