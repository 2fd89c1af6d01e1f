"""Request Executor tests — URL composition, headers, caching hint, error mapping.

Tests cover:
    - URL = base_url + path, default GET, JSON body on POST
    - Content-Type default and caller override (case-insensitive)
    - Cache-Control max-age carries the requested tier (default tier when omitted)
    - Non-2xx: detail message, status fallback, "An error occurred" on bad JSON
    - Transport failure and malformed 2xx bodies converge to APIError
    - response_model validation, and raw JSON when no model is given
    - Concurrent identical calls are independent round trips; cache transport reuse
    - Redirects (307 trailing-slash) followed to the final response
"""

import asyncio

import httpx
import pytest

from shega_client.core.errors import (
    FALLBACK_ERROR_MESSAGE, INVALID_JSON_MESSAGE, TRANSPORT_ERROR_MESSAGE,
    UNEXPECTED_SHAPE_MESSAGE, APIError,
)
from shega_client.infrastructure.cache_transport import TTLCacheTransport
from shega_client.infrastructure.http_client import APIClient, get_client
from shega_client.schemas.health import ProbeStatus


# --- Request shaping ----------------------------------------------------------

@pytest.mark.asyncio
async def test_composes_url_from_base_and_path(client, backend, config):
    await client.request("/articles?page=1")
    assert str(backend.last.url) == f"{config.base_url}/articles?page=1"
    assert backend.last.method == "GET"


@pytest.mark.asyncio
async def test_sends_json_content_type(client, backend):
    await client.request("/health")
    assert backend.last.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_caller_headers_take_precedence(client, backend):
    await client.request(
        "/health", headers={"content-type": "text/plain", "X-Trace": "abc"},
    )
    assert backend.last.headers.get_list("content-type") == ["text/plain"]
    assert backend.last.headers["x-trace"] == "abc"


@pytest.mark.asyncio
async def test_default_cache_tier_hint(client, backend, config):
    await client.request("/analytics/overview")
    assert backend.last.headers["cache-control"] == f"max-age={config.default_cache_seconds}"


@pytest.mark.asyncio
async def test_explicit_cache_seconds_hint(client, backend):
    await client.request("/health", cache_seconds=60)
    assert backend.last.headers["cache-control"] == "max-age=60"


@pytest.mark.asyncio
async def test_post_serialises_body(client, backend):
    await client.request("/scraping/trigger", method="POST", body={"site": "shega"})
    assert backend.last.method == "POST"
    assert backend.last_json() == {"site": "shega"}


@pytest.mark.asyncio
async def test_no_body_sends_empty_content(client, backend):
    await client.post("/scheduler/trigger")
    assert backend.last.method == "POST"
    assert backend.last.content == b""


# --- Success ------------------------------------------------------------------

@pytest.mark.asyncio
async def test_returns_raw_json_without_model(client, backend):
    backend.reply([{"date": "2024-01-01", "shega": 5}])
    assert await client.request("/x") == [{"date": "2024-01-01", "shega": 5}]


@pytest.mark.asyncio
async def test_validates_with_response_model(client, backend):
    backend.reply({"status": "ready"})
    result = await client.get("/health/ready", response_model=ProbeStatus)
    assert isinstance(result, ProbeStatus)
    assert result.status == "ready"


@pytest.mark.asyncio
async def test_shape_mismatch_raises_api_error(client, backend):
    backend.reply({"unexpected": True})
    with pytest.raises(APIError) as exc:
        await client.get("/health/ready", response_model=ProbeStatus)
    assert exc.value.message == UNEXPECTED_SHAPE_MESSAGE
    assert exc.value.status_code == 200
    assert exc.value.context.debug_info["errors"]


@pytest.mark.asyncio
async def test_non_json_success_body_raises_api_error(client, backend):
    backend.reply(content=b"<html>oops</html>")
    with pytest.raises(APIError) as exc:
        await client.request("/health")
    assert exc.value.message == INVALID_JSON_MESSAGE


# --- Failure mapping ----------------------------------------------------------

@pytest.mark.asyncio
async def test_detail_becomes_message(client, backend):
    backend.reply({"detail": "X"}, status_code=400)
    with pytest.raises(APIError) as exc:
        await client.request("/articles")
    assert exc.value.message == "X"
    assert exc.value.status_code == 400
    assert exc.value.context.path == "/articles"


@pytest.mark.asyncio
async def test_unparseable_error_body_uses_fallback(client, backend):
    backend.reply(content=b"Internal Server Error", status_code=500)
    with pytest.raises(APIError) as exc:
        await client.request("/health")
    assert exc.value.message == FALLBACK_ERROR_MESSAGE
    assert exc.value.status_code == 500


@pytest.mark.asyncio
async def test_empty_error_body_uses_fallback(client, backend):
    backend.reply(content=b"", status_code=502)
    with pytest.raises(APIError, match="^An error occurred$"):
        await client.request("/health")


@pytest.mark.asyncio
async def test_json_without_detail_reports_status(client, backend):
    backend.reply({}, status_code=404)
    with pytest.raises(APIError, match="HTTP error! status: 404"):
        await client.request("/articles/missing")


@pytest.mark.asyncio
async def test_non_string_detail_reports_status(client, backend):
    backend.reply({"detail": [{"loc": ["query", "page"], "msg": "bad"}]}, status_code=422)
    with pytest.raises(APIError) as exc:
        await client.request("/articles?page=x")
    assert exc.value.message == "HTTP error! status: 422"


@pytest.mark.asyncio
async def test_transport_failure_maps_to_api_error(config):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with APIClient(config, transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(APIError) as exc:
            await client.request("/health")
    assert exc.value.message == TRANSPORT_ERROR_MESSAGE
    assert exc.value.is_transport_error
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_maps_to_api_error(config):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with APIClient(config, transport=httpx.MockTransport(slow)) as client:
        with pytest.raises(APIError) as exc:
            await client.request("/health")
    assert exc.value.status_code is None


@pytest.mark.asyncio
async def test_no_retry_on_failure(client, backend):
    backend.reply({"detail": "boom"}, status_code=503)
    with pytest.raises(APIError):
        await client.request("/scheduler/status")
    assert len(backend.requests) == 1


@pytest.mark.asyncio
async def test_follows_trailing_slash_redirect(config):
    seen = []

    def slash_redirect(request):
        seen.append(request.url.path)
        if not request.url.path.endswith("/"):
            return httpx.Response(307, headers={"Location": f"{request.url.path}/"})
        return httpx.Response(200, json={"items": [], "total": 0})

    async with APIClient(config, transport=httpx.MockTransport(slash_redirect)) as client:
        result = await client.request("/articles")
    assert result == {"items": [], "total": 0}
    assert seen == ["/api/articles", "/api/articles/"]


# --- Lifecycle ----------------------------------------------------------------

@pytest.mark.asyncio
async def test_context_manager_closes_client(config, backend):
    async with APIClient(config, transport=httpx.MockTransport(backend.handler)) as client:
        assert not client.is_closed
    assert client.is_closed


@pytest.mark.asyncio
async def test_get_client_reuses_instance(monkeypatch):
    monkeypatch.setenv("SHEGA_API_URL", "http://probe.test/api")
    monkeypatch.setattr(
        "shega_client.infrastructure.http_client._default_client", None,
    )
    first = get_client()
    assert get_client() is first
    assert first.config.base_url == "http://probe.test/api"
    await first.aclose()
    assert get_client() is not first
    await get_client().aclose()


# --- Concurrency / caching ----------------------------------------------------

@pytest.mark.asyncio
async def test_concurrent_identical_requests_not_deduplicated(client, backend):
    await asyncio.gather(
        client.request("/analytics/overview"),
        client.request("/analytics/overview"),
    )
    assert len(backend.requests) == 2


@pytest.mark.asyncio
async def test_cache_transport_serves_repeat_reads(config, backend):
    backend.reply({"status": "ready"})
    transport = TTLCacheTransport(httpx.MockTransport(backend.handler))
    async with APIClient(config, transport=transport) as client:
        first = await client.get("/health/ready", cache_seconds=60, response_model=ProbeStatus)
        second = await client.get("/health/ready", cache_seconds=60, response_model=ProbeStatus)
    assert first == second
    assert len(backend.requests) == 1
