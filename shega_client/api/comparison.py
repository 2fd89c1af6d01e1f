"""Comparison Namespace — Shega vs Addis Insight side-by-side analytics."""

from shega_client.core import endpoints
from shega_client.core.domain_types import EntityType
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.comparison import (
    ContentLengthComparison, EntityComparison, KeywordComparison,
)


async def get_keywords(
    client: APIClient, *, limit: int | None = None,
) -> KeywordComparison:
    return await client.get(
        with_query(endpoints.COMPARE_KEYWORDS, {"limit": limit}),
        response_model=KeywordComparison,
    )


async def get_entities(
    client: APIClient,
    *,
    entity_type: EntityType | str | None = None,
    limit: int | None = None,
) -> EntityComparison:
    return await client.get(
        with_query(
            endpoints.COMPARE_ENTITIES,
            {"entity_type": entity_type, "limit": limit},
        ),
        response_model=EntityComparison,
    )


async def get_content_length(client: APIClient) -> ContentLengthComparison:
    return await client.get(
        endpoints.CONTENT_LENGTH_COMPARISON,
        response_model=ContentLengthComparison,
    )
