"""Query Encoder — optional-parameter mapping → URL query string.

Invariants:
    - Pure: same mapping always yields the same string, insertion order kept
    - None values are omitted entirely
    - Falsy-but-present values (0, "", False) are kept
    - Booleans render as "true" / "false"; str Enums render as their value
    - Empty result is "", never a bare "?"

Design Decisions:
    - quote(safe="") on both key and value: every reserved character escaped,
      spaces become %20 rather than "+"
"""

from collections.abc import Mapping
from enum import Enum
from urllib.parse import quote

QueryValue = str | int | float | bool | Enum | None


def _stringify(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_query(params: Mapping[str, QueryValue]) -> str:
    """Encode present parameters as ``k=v&k=v`` (no leading '?')."""
    return "&".join(
        f"{quote(key, safe='')}={quote(_stringify(value), safe='')}"
        for key, value in params.items()
        if value is not None
    )


def with_query(path: str, params: Mapping[str, QueryValue]) -> str:
    """Append the encoded query to a path, adding '?' only when non-empty."""
    query = encode_query(params)
    return f"{path}?{query}" if query else path
