"""
Pytest configuration and shared fixtures.

Fixtures:
- mock_cloze_client: a ClozeClient double whose async methods are AsyncMocks
- make_cloze_client: builds a real ClozeClient over httpx.MockTransport and
  records every outgoing request
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import httpx
import pytest

# Add src/ to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from cloze_mcp.clients.cloze import ClozeClient  # noqa: E402
from cloze_mcp.core.config import get_settings  # noqa: E402

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.cloze.test"


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Ensure each test builds Settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_cloze_client() -> MagicMock:
    """
    ClozeClient double for dispatcher tests.

    spec=ClozeClient turns every async method into an AsyncMock, and
    accessing a method the real client lacks raises AttributeError.
    """
    return MagicMock(spec=ClozeClient)


class RecordingTransport:
    """Collects requests sent through an httpx.MockTransport."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_cloze_client():
    """
    Factory for a ClozeClient backed by httpx.MockTransport.

    Usage:
        client, transport = make_cloze_client(lambda req: httpx.Response(200, json={}))
    """

    def _make(
        responder: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> tuple[ClozeClient, RecordingTransport]:
        transport = RecordingTransport(
            responder or (lambda request: httpx.Response(200, json={"errorcode": 0}))
        )
        http_client = httpx.AsyncClient(
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(transport),
            headers={"Content-Type": "application/json"},
        )
        client = ClozeClient(
            api_key=TEST_API_KEY, base_url=TEST_BASE_URL, http_client=http_client
        )
        return client, transport

    return _make
