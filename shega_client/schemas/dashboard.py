"""Dashboard Schemas — overview cards, daily counts, per-site summary."""

from shega_client.schemas.base import APIModel


class ArticleCount(APIModel):
    shega_count: int
    addis_insight_count: int
    difference: int | None = None
    percentage_difference: float | None = None


class OverviewResponse(APIModel):
    article_count: ArticleCount
    date_range: dict | None = None


class DailyArticle(APIModel):
    date: str
    shega: int = 0
    addis_insight: int = 0


class SiteSummary(APIModel):
    total_articles: int
    unique_authors: int | None = None
    avg_body_word_count: float | None = None
    avg_headline_word_count: float | None = None
    avg_readability: float | None = None
    avg_sentiment: float | None = None


class DashboardSummary(APIModel):
    shega: SiteSummary | None = None
    addis_insight: SiteSummary | None = None
    comparison: dict[str, float] | None = None
