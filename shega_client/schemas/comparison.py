"""Comparison Schemas — cross-site keyword/entity overlap and content length."""

from shega_client.schemas.base import APIModel


class SharedTerm(APIModel):
    """Keyword or entity present on both sites."""
    keyword: str | None = None
    entity: str | None = None
    shega_count: int = 0
    addis_count: int = 0


class UniqueTerm(APIModel):
    keyword: str | None = None
    entity: str | None = None
    count: int


class KeywordComparison(APIModel):
    shared: list[SharedTerm] = []
    shega_only: list[UniqueTerm] = []
    addis_insight_only: list[UniqueTerm] = []
    summary: dict[str, int] | None = None


class EntityComparison(APIModel):
    entity_type: str | None = None
    shared: list[SharedTerm] = []
    shega_only: list[UniqueTerm] = []
    addis_insight_only: list[UniqueTerm] = []


class ContentLengthSiteStats(APIModel):
    avg_body_words: float | None = None
    min_body_words: int | None = None
    max_body_words: int | None = None
    count: int | None = None


class ContentLengthComparison(APIModel):
    sites: dict[str, ContentLengthSiteStats] = {}
    available_sites: list[str] = []
