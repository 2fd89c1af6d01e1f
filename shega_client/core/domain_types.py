"""Domain Types — enums that replace bare strings in request parameters.

Invariants:
    - All valid filter values encoded as Enums, no raw string matching
    - str Enums: pass straight into query strings and JSON bodies

Design Decisions:
    - Namespaces accept either the enum or its plain string value; the
      Query Encoder renders both identically
"""

from enum import Enum


class Site(str, Enum):
    """News sites tracked by the analytics backend."""
    SHEGA = "shega"
    ADDIS_INSIGHT = "addis_insight"


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class EntityType(str, Enum):
    """Named-entity groups produced by NLP enrichment."""
    PERSONS = "persons"
    ORGANIZATIONS = "organizations"
    LOCATIONS = "locations"


class ContentLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Granularity(str, Enum):
    """Bucket size for author productivity timelines."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class CacheTier(str, Enum):
    """Revalidation windows, resolved to seconds by ClientConfig."""
    SHORT = "short"
    DEFAULT = "default"
    LONG = "long"
