"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - test_data_dir: Path to sample files directory
    - sample_csv_path: Path to a spending history CSV
    - client_config: ClientConfig pointing at a test endpoint
    - fake_transport: Controllable stand-in for ChatTransport
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from cardchat.api import app
from cardchat.client.config import ClientConfig
from cardchat.errors import TransportError


class FakeTransport:
    """Records queries and answers them once released by the test."""

    def __init__(self, reply: str = "", error: TransportError | None = None) -> None:
        self.reply = reply
        self.error = error
        self.queries: list[str] = []
        self.release = asyncio.Event()
        self.release.set()

    def hold(self) -> None:
        """Keep send() suspended until release is set."""
        self.release.clear()

    async def send(self, query: str) -> str:
        self.queries.append(query)
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory.

    Returns:
        Absolute path to tests/data/ directory.
    """
    return Path(__file__).parent / "data"


@pytest.fixture
def sample_csv_path(test_data_dir: Path) -> Path:
    """Return path to sample spending CSV for testing."""
    return test_data_dir / "spending.csv"


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration aimed at a fake backend host."""
    return ClientConfig(api_url="http://backend.test/chat", timeout=5.0)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Transport that answers immediately with an empty reply."""
    return FakeTransport()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
