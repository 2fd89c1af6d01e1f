"""Author Schemas — rankings, sentiment profiles, productivity timelines, keywords."""

from shega_client.schemas.base import APIModel


class TopAuthor(APIModel):
    author: str
    article_count: int
    avg_word_count: float | None = None


class SentimentBreakdown(APIModel):
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_pct: float | None = None


class AuthorWithStats(TopAuthor):
    site: str | None = None
    avg_polarity: float | None = None
    avg_subjectivity: float | None = None
    sentiment_breakdown: SentimentBreakdown | None = None


class PolarityRange(APIModel):
    min: float
    max: float


class AuthorSentiment(APIModel):
    author: str
    site: str | None = None
    article_count: int
    avg_polarity: float
    avg_subjectivity: float | None = None
    polarity_range: PolarityRange | None = None


class ProductivityPeriod(APIModel):
    start: str
    end: str
    days: int
    granularity: str


class ProductivitySummary(APIModel):
    total_articles: int
    active_periods: int | None = None
    avg_per_period: float | None = None
    max_in_period: int | None = None
    min_in_period: int | None = None


class ProductivityPoint(APIModel):
    date: str
    total: int
    shega: int = 0
    addis_insight: int = 0
    avg_word_count: float | None = None


class AuthorProductivity(APIModel):
    author: str
    period: ProductivityPeriod | None = None
    summary: ProductivitySummary | None = None
    timeline: list[ProductivityPoint] = []


class KeywordCount(APIModel):
    keyword: str
    count: int


class AuthorKeywordStats(APIModel):
    total_articles: int
    sites: list[str] = []
    avg_keywords_per_article: float | None = None


class AuthorKeywords(APIModel):
    author: str
    stats: AuthorKeywordStats | None = None
    headline_keywords: list[KeywordCount] = []
    body_keywords: list[KeywordCount] = []
    total_unique_headline_keywords: int | None = None
    total_unique_body_keywords: int | None = None
