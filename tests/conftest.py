"""Fixtures for energy dashboard tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Any

import pytest
from aioresponses import aioresponses

from energy_dashboard import Configuration, HomeAssistantClient, MemoryStore

HA_URL = "http://homeassistant.local:8123"
TOKEN = "test-token-12345"


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, payload: Any = None, status: int = 200, reason: str = "OK") -> None:
        self.payload = payload
        self.status = status
        self.reason = reason

    async def json(self, content_type: str | None = "application/json") -> Any:
        return self.payload


class FakeSession:
    """Session recording when and where each request was dispatched."""

    def __init__(self, handler: Callable[[str], FakeResponse] | None = None) -> None:
        self.handler = handler or (lambda url: FakeResponse({"state": "0"}))
        self.calls: list[tuple[float, str, dict[str, Any]]] = []
        self.closed = False

    @property
    def urls(self) -> list[str]:
        return [url for _, url, _ in self.calls]

    @property
    def times(self) -> list[float]:
        return [when for when, _, _ in self.calls]

    def get(self, url: str, **kwargs: Any):
        self.calls.append((asyncio.get_running_loop().time(), url, kwargs))
        return self._respond(url)

    @asynccontextmanager
    async def _respond(self, url: str):
        yield self.handler(url)

    async def close(self) -> None:
        self.closed = True


class HangingSession(FakeSession):
    """Session whose requests never complete."""

    def __init__(self) -> None:
        super().__init__()
        self.aborted = False

    @asynccontextmanager
    async def _respond(self, url: str):
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.aborted = True
            raise
        yield FakeResponse()


@pytest.fixture
def config() -> Configuration:
    """Return a configuration pointing at a test server."""
    return Configuration(server_url=HA_URL, access_token=TOKEN)


@pytest.fixture
def store() -> MemoryStore:
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def fake_session() -> FakeSession:
    """Return a session answering every request with a state object."""
    return FakeSession()


@pytest.fixture
def hanging_session() -> HangingSession:
    """Return a session that never answers."""
    return HangingSession()


@pytest.fixture
async def fake_client(config, fake_session):
    """Return a client without rate limiting on top of the fake session."""
    client = HomeAssistantClient(config, fake_session, min_request_interval=0)
    yield client
    await client.close_connection()


@pytest.fixture
async def client(config):
    """Return a client with its own aiohttp session."""
    client = HomeAssistantClient(config, min_request_interval=0)
    yield client
    await client.close_connection()


@pytest.fixture
def mock_aioresponse():
    """Intercept aiohttp requests."""
    with aioresponses() as mock:
        yield mock
