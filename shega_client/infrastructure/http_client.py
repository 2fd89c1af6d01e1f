"""Request Executor — the single choke point for every analytics API call.

Invariants:
    - URL = config.base_url + path (path already carries its query string)
    - Content-Type: application/json on every call; caller headers win on conflict
    - Cache tier lifetime attached as `Cache-Control: max-age=<s>` on every call
    - Every failure leaves as APIError (core/errors.py), never a raw httpx/pydantic error
    - Redirects followed (FastAPI answers trailing-slash mismatches with 307)
    - No retries, no timeout override, no in-flight deduplication

Design Decisions:
    - Wrapper over raw httpx.AsyncClient: isolates error mapping from namespaces
    - Config injected at construction (defaults to resolve_config()), never read ambiently
    - Responses validated against the operation's pydantic model when one is declared
"""

import json
import logging
import time
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from shega_client.config import ClientConfig, resolve_config
from shega_client.core.errors import (
    FALLBACK_ERROR_MESSAGE,
    INVALID_JSON_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    UNEXPECTED_SHAPE_MESSAGE,
    APIError,
    ErrorContext,
    http_status_message,
)
from shega_client.infrastructure.cache_transport import TTLCacheTransport

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def extract_error_message(response: httpx.Response) -> str:
    """Message for a non-2xx response, from its JSON `detail` when possible."""
    try:
        payload = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return http_status_message(response.status_code)


class APIClient:
    """Async client bound to one ClientConfig and one connection pool."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.config = config if config is not None else resolve_config()
        if transport is None and self.config.cache_enabled:
            transport = TTLCacheTransport(max_entries=self.config.cache_max_entries)
        self._http = httpx.AsyncClient(
            transport=transport, headers=headers, follow_redirects=True,
        )

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
        cache_seconds: int | None = None,
        response_model: Any = None,
    ) -> Any:
        """Perform one call; return the parsed (and validated) JSON body.

        cache_seconds=None applies the default tier. response_model may be a
        pydantic model, a list[...] of one, or any type TypeAdapter accepts;
        None returns the decoded JSON untouched.
        """
        if cache_seconds is None:
            cache_seconds = self.config.default_cache_seconds
        url = f"{self.config.base_url}{path}"
        context = ErrorContext(method=method, path=path)
        request_headers = httpx.Headers(_JSON_HEADERS)
        request_headers["Cache-Control"] = f"max-age={cache_seconds}"
        request_headers.update(headers or {})
        content = None if body is None else json.dumps(body).encode("utf-8")

        started = time.perf_counter()
        try:
            response = await self._http.request(
                method, url, headers=request_headers, content=content,
            )
        except httpx.TransportError as e:
            logger.warning(
                f"Transport failure: {e}",
                extra={"method": method, "path": path},
            )
            context.debug_info = {"error": repr(e)}
            raise APIError(TRANSPORT_ERROR_MESSAGE, context=context) from e

        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        log_extra = {
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "cache_seconds": cache_seconds,
            "elapsed_ms": elapsed_ms,
        }

        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(f"API error: {message}", extra=log_extra)
            raise APIError(message, response.status_code, context)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Response body is not JSON", extra=log_extra)
            raise APIError(
                INVALID_JSON_MESSAGE, response.status_code, context,
            ) from e

        logger.debug("API success", extra=log_extra)
        if response_model is None:
            return data
        return self._validate(data, response_model, response.status_code, context)

    def _validate(self, data: Any, response_model: Any, status_code: int, context: ErrorContext) -> Any:
        try:
            return _adapter(response_model).validate_python(data)
        except ValidationError as e:
            logger.warning(
                f"Response failed validation: {e.error_count()} error(s)",
                extra={"method": context.method, "path": context.path},
            )
            context.debug_info = {"errors": e.errors(include_url=False)}
            raise APIError(UNEXPECTED_SHAPE_MESSAGE, status_code, context) from e

    async def get(self, path: str, *, cache_seconds: int | None = None, response_model: Any = None) -> Any:
        return await self.request(
            path, cache_seconds=cache_seconds, response_model=response_model,
        )

    async def post(self, path: str, body: Any = None, *, cache_seconds: int | None = None, response_model: Any = None) -> Any:
        return await self.request(
            path, method="POST", body=body,
            cache_seconds=cache_seconds, response_model=response_model,
        )


_default_client: APIClient | None = None


def get_client() -> APIClient:
    """Process-wide client, created lazily from resolve_config()."""
    global _default_client
    if _default_client is None or _default_client.is_closed:
        _default_client = APIClient()
    return _default_client
