"""Domain Namespaces — one module per business capability.

Invariants:
    - Every function takes the APIClient first and returns its typed result unchanged
    - Namespaces add no error handling: failures propagate as APIError
    - Paths come from core.endpoints, queries from core.query

Design Decisions:
    - Modules of plain async functions over classes: composition over the one
      shared executor, nothing to instantiate per capability
"""

from shega_client.api import (
    articles,
    authors,
    categories,
    comparison,
    dashboard,
    health,
    keywords,
    nlp,
    publishing,
    scheduler,
    scraping,
    sentiment,
    topics,
)

__all__ = [
    "articles",
    "authors",
    "categories",
    "comparison",
    "dashboard",
    "health",
    "keywords",
    "nlp",
    "publishing",
    "scheduler",
    "scraping",
    "sentiment",
    "topics",
]
