"""Articles Namespace — filtered listing, single-article lookup, samples, stats.

Invariants:
    - Path identifiers (id, site, slug) go through the Endpoint Table, never the query
    - Listing filters are passed verbatim as query parameters; None filters are omitted
    - Stats summary uses the long tier; everything else the default tier
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import ContentLength, SentimentLabel, Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.articles import (
    Article, ArticleListResponse, ArticleSample, ArticleStatsSummary,
)


async def get_articles(
    client: APIClient,
    *,
    page: int | None = None,
    per_page: int | None = None,
    site: Site | str | None = None,
    author: str | None = None,
    category: str | None = None,
    keyword: str | None = None,
    topic_label: str | None = None,
    sentiment: SentimentLabel | str | None = None,
    content_length: ContentLength | str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    search: str | None = None,
    sort_by: str | None = None,
) -> ArticleListResponse:
    """One page of articles matching every supplied filter.

    Dates are ISO ``YYYY-MM-DD`` strings; sort_by is one of recent, oldest,
    positive, negative, long, short.
    """
    query = {
        "page": page,
        "per_page": per_page,
        "site": site,
        "author": author,
        "category": category,
        "keyword": keyword,
        "topic_label": topic_label,
        "sentiment": sentiment,
        "content_length": content_length,
        "start_date": start_date,
        "end_date": end_date,
        "search": search,
        "sort_by": sort_by,
    }
    return await client.get(
        with_query(endpoints.ARTICLES, query),
        response_model=ArticleListResponse,
    )


async def get_article_by_id(client: APIClient, article_id: str) -> Article:
    return await client.get(
        endpoints.article_by_id(article_id), response_model=Article,
    )


async def get_article_by_slug(
    client: APIClient, site: Site | str, slug: str,
) -> Article:
    return await client.get(
        endpoints.article_by_slug(site, slug), response_model=Article,
    )


async def get_stats(client: APIClient) -> ArticleStatsSummary:
    return await client.get(
        endpoints.ARTICLE_STATS,
        cache_seconds=client.config.long_cache_seconds,
        response_model=ArticleStatsSummary,
    )


async def get_samples(
    client: APIClient,
    *,
    limit: int | None = None,
    sort_by: str | None = None,
    site: Site | str | None = None,
) -> list[ArticleSample]:
    return await client.get(
        with_query(
            endpoints.ARTICLE_SAMPLES,
            {"limit": limit, "sort_by": sort_by, "site": site},
        ),
        response_model=list[ArticleSample],
    )
