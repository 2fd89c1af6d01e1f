"""Error Contract — the single exception every client failure converges to.

Invariants:
    - APIError has no subclasses: transport failures, non-2xx responses and
      malformed bodies all surface as APIError
    - message is the primary signal; status_code is secondary metadata
    - status_code is None only when no HTTP response was received

Design Decisions:
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Message strings for the fallback paths are module constants so tests and
      callers can compare against them
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

FALLBACK_ERROR_MESSAGE = "An error occurred"
TRANSPORT_ERROR_MESSAGE = "Unable to reach the analytics service"
INVALID_JSON_MESSAGE = "Invalid JSON in response"
UNEXPECTED_SHAPE_MESSAGE = "Unexpected response shape"


def http_status_message(status_code: int) -> str:
    """Message used when an error body parses but carries no detail."""
    return f"HTTP error! status: {status_code}"


@dataclass
class ErrorContext:
    """Where and when a request failed."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class APIError(Exception):
    """Failure of a single analytics API call."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.context = context or ErrorContext()

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None

    def to_dict(self) -> dict:
        """Render in the backend's own error envelope shape."""
        return {
            "detail": self.message,
            "status_code": self.status_code,
            "path": self.context.path,
        }

    def __repr__(self) -> str:
        return f"APIError({self.message!r}, status_code={self.status_code})"
