"""Endpoint Table — operation name → path, relative to the configured base URL.

Invariants:
    - Every path starts with '/' and carries no query string
    - Dynamic paths are built only by the functions below, never by
      concatenation at call sites
    - Every interpolated identifier is percent-encoded as a single path
      segment ('/' and spaces included; "." and ".." as %2E)

Design Decisions:
    - Constants + small functions over a class: nothing to instantiate
    - ENDPOINTS enumerates the whole table for lookups and exhaustiveness tests
"""

from collections.abc import Callable
from enum import Enum
from urllib.parse import quote


def _segment(identifier: str | Enum) -> str:
    if isinstance(identifier, Enum):
        identifier = identifier.value
    encoded = quote(str(identifier), safe="")
    # "." and ".." would be collapsed as dot segments by URL normalisation
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


# ─── Health ──────────────────────────────────────────────────────

HEALTH = "/health"
HEALTH_READY = "/health/ready"
HEALTH_LIVE = "/health/live"

# ─── Dashboard ───────────────────────────────────────────────────

OVERVIEW = "/analytics/overview"
DAILY_ARTICLES = "/analytics/articles/daily"
DASHBOARD_SUMMARY = "/analytics/dashboard/summary"

# ─── Articles ────────────────────────────────────────────────────

ARTICLES = "/articles"
ARTICLE_STATS = "/articles/stats/summary"
ARTICLE_SAMPLES = "/analytics/articles/samples"


def article_by_id(article_id: str) -> str:
    return f"/articles/{_segment(article_id)}"


def article_by_slug(site: str | Enum, slug: str) -> str:
    return f"/articles/by-slug/{_segment(site)}/{_segment(slug)}"


# ─── Authors ─────────────────────────────────────────────────────

TOP_AUTHORS = "/analytics/authors/top"
TOP_AUTHORS_WITH_STATS = "/analytics/authors/top-with-stats"
AUTHORS_SENTIMENT = "/analytics/authors/sentiment"


def author_productivity(author: str) -> str:
    return f"/analytics/authors/{_segment(author)}/productivity"


def author_keywords(author: str) -> str:
    return f"/analytics/authors/{_segment(author)}/keywords"


# ─── Categories / Keywords / Topics ──────────────────────────────

CATEGORIES_DISTRIBUTION = "/analytics/categories/distribution"
TOP_KEYWORDS = "/analytics/keywords/top"

TOPICS_EVOLUTION = "/analytics/topics/evolution"
TOPICS_SPIKES = "/analytics/topics/spikes"
TOPICS_SENTIMENT = "/analytics/topics/sentiment"
TOPICS_SENTIMENT_DISTRIBUTION = "/analytics/topics/sentiment-distribution"

# ─── Sentiment ───────────────────────────────────────────────────

SENTIMENT_TIMELINE = "/analytics/sentiment/timeline"
SENTIMENT_TOP_POSITIVE = "/analytics/sentiment/top-positive"
SENTIMENT_TOP_NEGATIVE = "/analytics/sentiment/top-negative"

# ─── NLP ─────────────────────────────────────────────────────────

NLP_SENTIMENT_SUMMARY = "/analytics/nlp/sentiment/summary"
NLP_SENTIMENT_BY_SITE = "/analytics/nlp/sentiment/by-site"
NLP_TOP_ENTITIES = "/analytics/nlp/entities/top"
NLP_READABILITY_SUMMARY = "/analytics/nlp/readability/summary"
NLP_READABILITY_BY_SITE = "/analytics/nlp/readability/by-site"
NLP_EXTRACTED_KEYWORDS = "/analytics/nlp/keywords/extracted"
NLP_ENRICHMENT_STATUS = "/analytics/nlp/enrichment-status"

# ─── Publishing ──────────────────────────────────────────────────

PUBLISHING_TRENDS = "/analytics/publishing/trends"
PUBLISHING_YEARLY = "/analytics/publishing/yearly"

# ─── Comparison ──────────────────────────────────────────────────

COMPARE_KEYWORDS = "/analytics/compare/keywords"
COMPARE_ENTITIES = "/analytics/compare/entities"
CONTENT_LENGTH_COMPARISON = "/analytics/content-length/comparison"

# ─── Scraping ────────────────────────────────────────────────────

SCRAPE_TRIGGER = "/scraping/trigger"
SCRAPE_ALL_STATUS = "/scraping/status"


def scrape_status(task_id: str) -> str:
    return f"/scraping/status/{_segment(task_id)}"


def scrape_preview(site: str | Enum) -> str:
    return f"/scraping/preview/{_segment(site)}"


# ─── Scheduler ───────────────────────────────────────────────────

SCHEDULER_STATUS = "/scheduler/status"
SCHEDULER_TRIGGER = "/scheduler/trigger"
SCHEDULER_HEALTH = "/scheduler/health"


EndpointSpec = str | Callable[..., str]

ENDPOINTS: dict[str, EndpointSpec] = {
    "health": HEALTH,
    "health_ready": HEALTH_READY,
    "health_live": HEALTH_LIVE,
    "overview": OVERVIEW,
    "daily_articles": DAILY_ARTICLES,
    "dashboard_summary": DASHBOARD_SUMMARY,
    "articles": ARTICLES,
    "article_by_id": article_by_id,
    "article_by_slug": article_by_slug,
    "article_stats": ARTICLE_STATS,
    "article_samples": ARTICLE_SAMPLES,
    "top_authors": TOP_AUTHORS,
    "top_authors_with_stats": TOP_AUTHORS_WITH_STATS,
    "authors_sentiment": AUTHORS_SENTIMENT,
    "author_productivity": author_productivity,
    "author_keywords": author_keywords,
    "categories_distribution": CATEGORIES_DISTRIBUTION,
    "top_keywords": TOP_KEYWORDS,
    "topics_evolution": TOPICS_EVOLUTION,
    "topics_spikes": TOPICS_SPIKES,
    "topics_sentiment": TOPICS_SENTIMENT,
    "topics_sentiment_distribution": TOPICS_SENTIMENT_DISTRIBUTION,
    "sentiment_timeline": SENTIMENT_TIMELINE,
    "sentiment_top_positive": SENTIMENT_TOP_POSITIVE,
    "sentiment_top_negative": SENTIMENT_TOP_NEGATIVE,
    "nlp_sentiment_summary": NLP_SENTIMENT_SUMMARY,
    "nlp_sentiment_by_site": NLP_SENTIMENT_BY_SITE,
    "nlp_top_entities": NLP_TOP_ENTITIES,
    "nlp_readability_summary": NLP_READABILITY_SUMMARY,
    "nlp_readability_by_site": NLP_READABILITY_BY_SITE,
    "nlp_extracted_keywords": NLP_EXTRACTED_KEYWORDS,
    "nlp_enrichment_status": NLP_ENRICHMENT_STATUS,
    "publishing_trends": PUBLISHING_TRENDS,
    "publishing_yearly": PUBLISHING_YEARLY,
    "compare_keywords": COMPARE_KEYWORDS,
    "compare_entities": COMPARE_ENTITIES,
    "content_length_comparison": CONTENT_LENGTH_COMPARISON,
    "scrape_trigger": SCRAPE_TRIGGER,
    "scrape_status": scrape_status,
    "scrape_all_status": SCRAPE_ALL_STATUS,
    "scrape_preview": scrape_preview,
    "scheduler_status": SCHEDULER_STATUS,
    "scheduler_trigger": SCHEDULER_TRIGGER,
    "scheduler_health": SCHEDULER_HEALTH,
}
