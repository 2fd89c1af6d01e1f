"""Time-based Response Cache — httpx transport that honours request max-age hints.

Invariants:
    - Only GET requests with 2xx responses and max-age > 0 are stored
    - Entries are keyed by full URL and served until max-age seconds elapse
      (monotonic clock); the next access after expiry refetches
    - No invalidation primitive: entries leave only by expiry or by eviction
    - Expired entries are swept on every store; at most max_entries are held,
      oldest stored first out
    - Cached bodies are replayed as fresh httpx.Response objects

Design Decisions:
    - Lives in the transport, not in APIClient: the executor only attaches the
      hint, callers never see whether a response was cached
    - In-memory dict + Lock: entries are small JSON documents, one process
"""

import logging
import re
import time
from dataclasses import dataclass
from threading import Lock

import httpx

logger = logging.getLogger(__name__)

_MAX_AGE = re.compile(r"max-age=(\d+)")

# Headers that describe the wire encoding, not the decoded body we store
_DROPPED_HEADERS = ("content-encoding", "content-length", "transfer-encoding")

DEFAULT_MAX_ENTRIES = 1024


def parse_max_age(cache_control: str | None) -> int:
    """Seconds from a Cache-Control header; 0 when absent or no-store."""
    if not cache_control or "no-store" in cache_control:
        return 0
    match = _MAX_AGE.search(cache_control)
    return int(match.group(1)) if match else 0


@dataclass
class CacheStats:
    hit: int = 0
    miss: int = 0
    store: int = 0
    evict: int = 0


@dataclass
class _Entry:
    expires_at: float
    status_code: int
    headers: list[tuple[str, str]]
    content: bytes


class TTLCacheTransport(httpx.AsyncBaseTransport):
    """Wraps another async transport with a max-age response cache."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        clock=time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_entries = max_entries
        self._clock = clock
        self._mu = Lock()
        self._entries: dict[str, _Entry] = {}
        self.stats = CacheStats()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        max_age = parse_max_age(request.headers.get("cache-control"))
        if request.method != "GET" or max_age <= 0:
            return await self._transport.handle_async_request(request)

        key = str(request.url)
        cached = self._lookup(key)
        if cached is not None:
            logger.debug("Cache hit", extra={"path": request.url.path, "cache": "hit"})
            return httpx.Response(
                cached.status_code,
                headers=cached.headers,
                content=cached.content,
                request=request,
            )

        logger.debug("Cache miss", extra={"path": request.url.path, "cache": "miss"})
        response = await self._transport.handle_async_request(request)
        if not 200 <= response.status_code < 300:
            return response

        content = await response.aread()
        headers = [
            (k, v) for k, v in response.headers.multi_items()
            if k.lower() not in _DROPPED_HEADERS
        ]
        with self._mu:
            self._prune(key)
            self._entries[key] = _Entry(
                expires_at=self._clock() + max_age,
                status_code=response.status_code,
                headers=headers,
                content=content,
            )
            self.stats.store += 1
        return httpx.Response(
            response.status_code,
            headers=headers,
            content=content,
            request=request,
        )

    def _lookup(self, key: str) -> _Entry | None:
        with self._mu:
            entry = self._entries.get(key)
            if entry is not None and entry.expires_at > self._clock():
                self.stats.hit += 1
                return entry
            if entry is not None:
                del self._entries[key]
            self.stats.miss += 1
            return None

    def _prune(self, incoming: str) -> None:
        """Make room for `incoming`. Caller holds the lock."""
        self._entries.pop(incoming, None)
        now = self._clock()
        stale = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in stale:
            del self._entries[key]
        while len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]
            self.stats.evict += 1

    def __len__(self) -> int:
        with self._mu:
            return len(self._entries)

    async def aclose(self) -> None:
        await self._transport.aclose()
