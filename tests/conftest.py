"""Pytest configuration and fixtures for mcp-server-alsoasked tests."""

import json
from typing import Any

import httpx
import pytest

from mcp_server_alsoasked.config import ApiSettings, AppSettings, ServerSettings

TEST_API_KEY = "aa-test-key-0123456789"
TEST_BASE_URL = "https://alsoasked.test/v1"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring a real AlsoAsked API key")


class FakeAlsoAskedAPI:
    """In-process stand-in for the AlsoAsked REST API built on httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response] = {}

    def respond(self, method: str, endpoint: str, status_code: int = 200, json_body: Any = None, text: str | None = None) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body)
        self._routes[(method, endpoint)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.removeprefix("/v1")
        response = self._routes.get((request.method, endpoint))
        if response is None:
            return httpx.Response(404, text=f"no route for {request.method} {endpoint}")
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_api() -> FakeAlsoAskedAPI:
    return FakeAlsoAskedAPI()


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def app_settings(api_settings: ApiSettings) -> AppSettings:
    return AppSettings(api=api_settings, server=ServerSettings(logging_level="DEBUG"))


def paa_response(*queries: tuple[str, list[dict[str, Any]]], search_id: str | None = "search-123") -> dict[str, Any]:
    """Build a successful /search body from (term, question trees) pairs."""
    body: dict[str, Any] = {
        "status": "success",
        "queries": [{"term": term, "results": results} for term, results in queries],
    }
    if search_id is not None:
        body["id"] = search_id
    return body
