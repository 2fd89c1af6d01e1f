"""Topics Namespace — keyword evolution, spikes and per-topic sentiment.

Invariants:
    - threshold is a spike ratio (recent / previous); weeks sizes both windows
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.topics import (
    TopicEvolution, TopicSentiment, TopicSentimentDistribution, TopicSpike,
)


async def get_evolution(
    client: APIClient, *, months: int | None = None, limit: int | None = None,
) -> TopicEvolution:
    return await client.get(
        with_query(endpoints.TOPICS_EVOLUTION, {"months": months, "limit": limit}),
        response_model=TopicEvolution,
    )


async def get_spikes(
    client: APIClient,
    *,
    weeks: int | None = None,
    threshold: float | None = None,
    limit: int | None = None,
) -> list[TopicSpike]:
    return await client.get(
        with_query(
            endpoints.TOPICS_SPIKES,
            {"weeks": weeks, "threshold": threshold, "limit": limit},
        ),
        response_model=list[TopicSpike],
    )


async def get_sentiment(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> TopicSentiment:
    return await client.get(
        with_query(endpoints.TOPICS_SENTIMENT, {"limit": limit, "site": site}),
        response_model=TopicSentiment,
    )


async def get_sentiment_distribution(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> list[TopicSentimentDistribution]:
    return await client.get(
        with_query(
            endpoints.TOPICS_SENTIMENT_DISTRIBUTION,
            {"limit": limit, "site": site},
        ),
        response_model=list[TopicSentimentDistribution],
    )
