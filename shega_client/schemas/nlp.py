"""NLP Schemas — sentiment summaries, entities, readability, enrichment progress."""

from shega_client.schemas.base import APIModel


class SentimentSummary(APIModel):
    count: int
    avg_polarity: float | None = None
    avg_subjectivity: float | None = None
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_pct: float | None = None
    negative_pct: float | None = None
    neutral_pct: float | None = None


class SentimentBySite(APIModel):
    shega: SentimentSummary
    addis_insight: SentimentSummary


class EntityItem(APIModel):
    entity: str
    count: int
    entity_type: str | None = None


class ReadabilitySummary(APIModel):
    count: int
    avg_readability: float | None = None
    avg_sentence_length: float | None = None
    avg_word_length: float | None = None
    avg_sentences: float | None = None


class SiteReadability(ReadabilitySummary):
    avg_word_count: float | None = None


class ReadabilityBySite(APIModel):
    shega: SiteReadability
    addis_insight: SiteReadability


class SiteEnrichment(APIModel):
    total: int
    enriched: int


class EnrichmentStatus(APIModel):
    total: int
    enriched: int
    pending: int = 0
    enriched_pct: float | None = None
    by_site: dict[str, SiteEnrichment] = {}
