"""Root conftest — shared test configuration.

Invariants:
    - Tests default SHEGA_API_URL to a non-routable test host
    - resolve_config() memo cleared around every test
    - All HTTP goes through httpx.MockTransport (no network)
"""

import json
import os

import httpx
import pytest

from shega_client.config import ClientConfig, resolve_config
from shega_client.infrastructure.http_client import APIClient

BASE_URL = "http://analytics.test/api"

# Ensure tests don't accidentally hit a real backend
os.environ.setdefault("SHEGA_API_URL", BASE_URL)


@pytest.fixture(autouse=True)
def _fresh_config():
    resolve_config.cache_clear()
    yield
    resolve_config.cache_clear()


@pytest.fixture
def config():
    return ClientConfig(base_url=BASE_URL, cache_enabled=False)


class FakeBackend:
    """Records requests and answers each with a queued or default response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, payload=None, status_code: int = 200, *, content: bytes | None = None):
        if content is not None:
            self._responses.append(httpx.Response(status_code, content=content))
        else:
            self._responses.append(httpx.Response(status_code, json=payload))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
async def client(config, backend):
    async with APIClient(config, transport=httpx.MockTransport(backend.handler)) as c:
        yield c
