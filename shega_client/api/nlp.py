"""NLP Namespace — enrichment outputs: sentiment, entities, readability.

Invariants:
    - Enrichment status moves while the pipeline runs: short tier
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import EntityType, Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.nlp import (
    EnrichmentStatus, EntityItem, ReadabilityBySite, ReadabilitySummary,
    SentimentBySite, SentimentSummary,
)


async def get_sentiment_summary(
    client: APIClient, *, site: Site | str | None = None,
) -> SentimentSummary:
    return await client.get(
        with_query(endpoints.NLP_SENTIMENT_SUMMARY, {"site": site}),
        response_model=SentimentSummary,
    )


async def get_sentiment_by_site(client: APIClient) -> SentimentBySite:
    return await client.get(
        endpoints.NLP_SENTIMENT_BY_SITE, response_model=SentimentBySite,
    )


async def get_top_entities(
    client: APIClient,
    *,
    entity_type: EntityType | str | None = None,
    limit: int | None = None,
    site: Site | str | None = None,
) -> list[EntityItem]:
    return await client.get(
        with_query(
            endpoints.NLP_TOP_ENTITIES,
            {"entity_type": entity_type, "limit": limit, "site": site},
        ),
        response_model=list[EntityItem],
    )


async def get_readability_summary(
    client: APIClient, *, site: Site | str | None = None,
) -> ReadabilitySummary:
    return await client.get(
        with_query(endpoints.NLP_READABILITY_SUMMARY, {"site": site}),
        response_model=ReadabilitySummary,
    )


async def get_readability_by_site(client: APIClient) -> ReadabilityBySite:
    return await client.get(
        endpoints.NLP_READABILITY_BY_SITE, response_model=ReadabilityBySite,
    )


async def get_enrichment_status(
    client: APIClient, *, site: Site | str | None = None,
) -> EnrichmentStatus:
    return await client.get(
        with_query(endpoints.NLP_ENRICHMENT_STATUS, {"site": site}),
        cache_seconds=client.config.short_cache_seconds,
        response_model=EnrichmentStatus,
    )
