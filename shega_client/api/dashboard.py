"""Dashboard Namespace — overview cards, daily article counts, site summary."""

from shega_client.core import endpoints
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.dashboard import (
    DailyArticle, DashboardSummary, OverviewResponse,
)


async def get_overview(client: APIClient) -> OverviewResponse:
    return await client.get(endpoints.OVERVIEW, response_model=OverviewResponse)


async def get_daily_articles(
    client: APIClient, *, days: int | None = None,
) -> list[DailyArticle]:
    """Per-day article counts for both sites over the last `days` days."""
    return await client.get(
        with_query(endpoints.DAILY_ARTICLES, {"days": days}),
        response_model=list[DailyArticle],
    )


async def get_summary(client: APIClient) -> DashboardSummary:
    return await client.get(
        endpoints.DASHBOARD_SUMMARY, response_model=DashboardSummary,
    )
