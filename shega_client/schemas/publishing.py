"""Publishing Schemas — hour/weekday/month trends and year-over-year stats."""

from shega_client.schemas.base import APIModel


class PublishingTrendItem(APIModel):
    value: str
    shega: int = 0
    addis_insight: int = 0


class PublishingTrends(APIModel):
    by_hour: list[PublishingTrendItem] = []
    by_weekday: list[PublishingTrendItem] = []
    by_month: list[PublishingTrendItem] = []


class YearlyStats(APIModel):
    articles: int
    unique_authors: int | None = None
    avg_word_count: float | None = None
    yoy_growth_pct: float | None = None  # None for the first year


class YearlyData(APIModel):
    year: int
    shega: YearlyStats | None = None
    addis_insight: YearlyStats | None = None


class YearlyResponse(APIModel):
    years: list[YearlyData] = []
