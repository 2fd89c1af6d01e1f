"""Sentiment Schemas — monthly timeline and extreme-polarity article lists."""

from shega_client.schemas.base import APIModel


class SiteSentimentMonth(APIModel):
    count: int
    avg_polarity: float | None = None
    positive_pct: float | None = None
    negative_pct: float | None = None


class SentimentTimelineItem(APIModel):
    month: str
    shega: SiteSentimentMonth | None = None
    addis_insight: SiteSentimentMonth | None = None


class TopSentimentArticle(APIModel):
    title: str
    excerpt: str | None = None
    posted_date: str | None = None
    author: str | None = None
    polarity: float
    url: str | None = None


class TopSentimentResponse(APIModel):
    shega: list[TopSentimentArticle] = []
    addis_insight: list[TopSentimentArticle] = []
