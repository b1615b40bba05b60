"""Pytest fixtures for testing"""

import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from plaid_proxy.api.main import create_app
from plaid_proxy.config import Settings
from plaid_proxy.infrastructure.clients.plaid import PlaidClient

TEST_CLIENT_ID = "test-client-id-5f3a"
TEST_SECRET = "test-secret-9c1e"

Responder = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakePlaid:
    """Stand-in for the Plaid API behind httpx.MockTransport"""

    def __init__(self):
        self.routes: Dict[str, Responder] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def respond(self, path: str, status_code: int = 200, json_body: Any = None, text: str | None = None) -> None:
        if text is not None:
            self.routes[path] = httpx.Response(status_code, text=text)
        else:
            self.routes[path] = httpx.Response(status_code, json=json_body)

    def fail(self, path: str, exc: Exception) -> None:
        self.routes[path] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.url.path, json.loads(request.content)))
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error_code": "NOT_FOUND"})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route

    def last_payload(self) -> Dict[str, Any]:
        return self.calls[-1][1]


@pytest.fixture
def settings() -> Settings:
    """Settings with recognizable credentials and a fake base URL"""
    return Settings(
        plaid_base_url="https://plaid.test",
        plaid_client_id=TEST_CLIENT_ID,
        plaid_secret=TEST_SECRET,
        http_timeout_seconds=2.0,
    )


@pytest.fixture
def fake_plaid() -> FakePlaid:
    return FakePlaid()


@pytest.fixture
def plaid_client(settings: Settings, fake_plaid: FakePlaid) -> PlaidClient:
    return PlaidClient(settings, transport=httpx.MockTransport(fake_plaid.handler))


@pytest.fixture
def client(settings: Settings, plaid_client: PlaidClient) -> TestClient:
    """Create FastAPI test client wired to the fake Plaid API"""
    app = create_app(settings, plaid_client)
    with TestClient(app) as test_client:
        yield test_client


def assert_no_credentials(response: httpx.Response) -> None:
    assert TEST_CLIENT_ID not in response.text
    assert TEST_SECRET not in response.text
