"""Scraping Namespace — trigger jobs and poll their progress.

Invariants:
    - trigger is the only write: POST with a JSON body
    - Task polling uses the short tier so progress stays fresh
    - A rejected trigger (job already running) surfaces as APIError like any failure
"""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.operations import (
    ScrapeAllStatusResponse, ScrapePreviewResponse, ScrapeResponse,
    ScrapeTaskStatus,
)


async def trigger(
    client: APIClient, site: Site | str, max_articles: int | None = None,
) -> ScrapeResponse:
    """Start a scraping job for one site."""
    body: dict = {"site": site.value if isinstance(site, Site) else site}
    if max_articles is not None:
        body["max_articles"] = max_articles
    return await client.post(
        endpoints.SCRAPE_TRIGGER,
        body,
        cache_seconds=client.config.short_cache_seconds,
        response_model=ScrapeResponse,
    )


async def get_status(client: APIClient, task_id: str) -> ScrapeTaskStatus:
    return await client.get(
        endpoints.scrape_status(task_id),
        cache_seconds=client.config.short_cache_seconds,
        response_model=ScrapeTaskStatus,
    )


async def get_all_status(client: APIClient) -> ScrapeAllStatusResponse:
    return await client.get(
        endpoints.SCRAPE_ALL_STATUS,
        cache_seconds=client.config.short_cache_seconds,
        response_model=ScrapeAllStatusResponse,
    )


async def preview(
    client: APIClient, site: Site | str, limit: int | None = None,
) -> ScrapePreviewResponse:
    """URLs the scraper would visit next, without scraping them."""
    return await client.get(
        with_query(endpoints.scrape_preview(site), {"limit": limit}),
        response_model=ScrapePreviewResponse,
    )
