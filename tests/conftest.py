"""
Pytest fixtures for the AI Gateway tests.

The provider is replaced by an httpx.MockTransport so every outbound call
is recorded and no network is touched.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.shared.config import ProviderConfig, RequestProxyConfig, ServerConfig
from main import create_app

API_KEY = "sk-test-0123456789abcdef-secret"
BASE_URL = "https://provider.test/v1"


class FakeProvider:
    """Answers provider calls from canned responses keyed by path."""

    def __init__(self):
        self._routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: List[httpx.Request] = []

    def respond(self, path: str, status_code: int = 200, **kwargs: Any) -> None:
        self._routes[path] = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, path: str, exc_class: type, message: str = "boom") -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_class(message, request=request)
        self._routes[path] = _raise

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [c for c in self.calls if c.url.path == f"/v1{path}"]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.calls[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        path = request.url.path.removeprefix("/v1")
        route = self._routes.get(path)
        if route is None:
            return httpx.Response(404, json={"error": {"message": f"No route for {path}"}})
        return route(request)


def build_config(server: Dict[str, Any] | None = None, provider: Dict[str, Any] | None = None) -> Dict[str, Any]:
    provider_settings = {"api_key": API_KEY, "base_url": BASE_URL}
    provider_settings.update(provider or {})
    return {
        "server": ServerConfig(**(server or {})).model_dump(),
        "provider": ProviderConfig(**provider_settings).model_dump(),
        "requestProxy": RequestProxyConfig().model_dump(),
    }


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def make_client(provider):
    """Builds a TestClient with optional configuration overrides."""
    clients = []

    def _make(**overrides: Any) -> TestClient:
        app = create_app(build_config(**overrides), transport=httpx.MockTransport(provider))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
