"""Article Schemas — article records, pagination envelope, samples, stats.

Invariants:
    - ArticleListResponse accepts either `items` or `articles` for the page body
    - Article.id accepts the Mongo `_id` key as well as `id`
"""

from pydantic import AliasChoices, Field

from shega_client.schemas.base import APIModel


class Article(APIModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    title: str
    slug: str | None = None
    site: str | None = None
    author: str | None = None
    posted_date: str | None = None
    body: str | None = None
    full_url: str | None = None
    categories: list[str] = []
    keywords: list[str] = []
    word_count_body: int | None = None
    nlp_enriched: bool | None = None
    sentiment_polarity: float | None = None
    sentiment_subjectivity: float | None = None
    sentiment_label: str | None = None
    readability_score: float | None = None
    entities_persons: list[str] | None = None
    entities_organizations: list[str] | None = None
    entities_locations: list[str] | None = None


class ArticleListResponse(APIModel):
    items: list[Article] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "articles"),
    )
    total: int
    page: int
    per_page: int
    total_pages: int | None = None


class ArticleSample(APIModel):
    title: str
    excerpt: str | None = None
    posted_date: str | None = None
    author: str | None = None
    site: str | None = None
    word_count: int | None = None
    polarity: float | None = None
    sentiment: str | None = None
    keywords: list[str] = []
    url: str | None = None


class ArticleStatsSite(APIModel):
    site: str = Field(validation_alias=AliasChoices("site", "_id"))
    count: int
    avg_word_count: float | None = None
    min_date: str | None = None
    max_date: str | None = None
    unique_authors_count: int | None = None


class ArticleStatsSummary(APIModel):
    total_articles: int
    sites: list[ArticleStatsSite] = []
