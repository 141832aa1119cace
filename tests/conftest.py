"""ABOUTME: Pytest configuration and shared fixtures for Kinsta MCP tests.

Provides environment fixtures, a recording httpx.MockTransport, and a
server wired to that transport so no test ever reaches the real API.
"""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from kinsta_mcp.kinsta.client import KinstaClient
from kinsta_mcp.kinsta.client_cache import KinstaClientCache
from kinsta_mcp.kinsta.config import KinstaConfig
from kinsta_mcp.server import create_server

TEST_API_KEY = "test-api-key"
TEST_COMPANY_ID = "company-123"
TEST_BASE_URL = "https://kinsta.test/v2"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], Any]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json_body(self) -> Any:
        return json.loads(self.last_request.content)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning the same JSON payload for every request."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return handler


@pytest.fixture
def clean_env(monkeypatch):
    """Fixture removing every Kinsta variable from the environment."""
    for name in ("KINSTA_API_KEY", "KINSTA_COMPANY_ID", "KINSTA_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def kinsta_env(clean_env):
    """Fixture providing a fully configured Kinsta environment."""
    clean_env.setenv("KINSTA_API_KEY", TEST_API_KEY)
    clean_env.setenv("KINSTA_COMPANY_ID", TEST_COMPANY_ID)
    clean_env.setenv("KINSTA_API_BASE_URL", TEST_BASE_URL)
    return clean_env


@pytest.fixture
def kinsta_config():
    """Fixture providing a KinstaConfig pointed at the test base URL."""
    return KinstaConfig(api_key=TEST_API_KEY, company_id=TEST_COMPANY_ID, base_url=TEST_BASE_URL)


@pytest.fixture
def make_client(kinsta_config):
    """Fixture returning a factory for clients served by a RecordingTransport.

    Returns:
        Callable(handler, timeout=None) -> (KinstaClient, RecordingTransport)
    """
    def factory(handler, timeout: Optional[float] = None):
        transport = RecordingTransport(handler)
        kwargs = {"transport": transport}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return KinstaClient(kinsta_config, **kwargs), transport
    return factory


@pytest.fixture
def make_server():
    """Fixture returning a factory for servers whose clients use a RecordingTransport.

    Returns:
        Callable(handler) -> (KinstaMCPServer, RecordingTransport)
    """
    def factory(handler):
        transport = RecordingTransport(handler)
        cache = KinstaClientCache(
            client_factory=lambda config: KinstaClient(config, transport=transport)
        )
        return create_server(client_cache=cache), transport
    return factory
