"""Category, Keyword and Topic Schemas."""

from shega_client.schemas.authors import KeywordCount
from shega_client.schemas.base import APIModel


class CategoryDistribution(APIModel):
    category: str
    shega_count: int = 0
    addis_insight_count: int = 0
    total: int | None = None


class TopKeyword(KeywordCount):
    pass


class ExtractedKeyword(APIModel):
    """NLP-extracted keyword with its mean relevance."""
    keyword: str
    count: int
    avg_relevance_score: float | None = None


class TopicEvolutionMonth(APIModel):
    month: str
    top_keywords: list[KeywordCount] = []
    total_keywords: int | None = None


class TopicEvolution(APIModel):
    months: int
    evolution: list[TopicEvolutionMonth] = []


class TopicSpike(APIModel):
    keyword: str
    recent_count: int
    previous_count: int
    spike_ratio: float | None = None  # None when the keyword is new
    is_new: bool = False


class KeywordSentiment(APIModel):
    keyword: str
    count: int
    avg_polarity: float
    avg_subjectivity: float | None = None


class TopicSentiment(APIModel):
    most_positive: list[KeywordSentiment] = []
    most_negative: list[KeywordSentiment] = []
    most_subjective: list[KeywordSentiment] = []


class TopicSentimentDistribution(APIModel):
    keyword: str
    total: int
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_pct: float | None = None
    negative_pct: float | None = None
    neutral_pct: float | None = None
