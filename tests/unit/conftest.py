"""Unit-test fixtures for the activity reporter."""

from __future__ import annotations

import typing as typ

import pytest

from tests.helpers.github_feed import FakeFeedServer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    import httpx


@pytest.fixture
def feed_server() -> FakeFeedServer:
    """Return a fake events endpoint answering with an empty feed."""
    return FakeFeedServer()


@pytest.fixture
def http_client(feed_server: FakeFeedServer) -> cabc.Iterator[httpx.Client]:
    """Yield an HTTP client wired to ``feed_server`` and close it afterwards."""
    client = feed_server.client()
    try:
        yield client
    finally:
        client.close()
