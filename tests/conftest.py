"""Shared fixtures: fetchers wired to an in-process httpx transport."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from apifetch.client import ResourceFetcher

BASE_URL = "https://api.example.test/v1"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest_asyncio.fixture
async def make_fetcher() -> AsyncIterator[Callable[[Handler], ResourceFetcher]]:
    """Yield a factory building a fetcher whose requests go to *handler*.

    Clients created through the factory are closed on teardown.
    """
    clients: list[httpx.AsyncClient] = []

    def _make(handler: Handler) -> ResourceFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return ResourceFetcher(BASE_URL, client=client)

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APIFETCH_BASE_URL", "APIFETCH_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
