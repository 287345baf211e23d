# ABOUTME: Shared pytest fixtures for bookfetch tests.
# ABOUTME: Provides a clean environment and wired engines over a fake HTTP client.

import pytest

from bookfetch.config import GOOGLE_BOOKS_ENV_VAR
from bookfetch.metadata.covers import CoverResolver
from bookfetch.metadata.googlebooks import GoogleBooksCatalog
from bookfetch.metadata.openlibrary import OpenLibraryCatalog
from bookfetch.metadata.reconcile import ReconciliationEngine
from tests.fixtures.fake_http import FakeHttpClient


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real GOOGLE_BOOKS key out of the tests."""
    monkeypatch.delenv(GOOGLE_BOOKS_ENV_VAR, raising=False)


@pytest.fixture
def make_engine():
    """Build an engine over a FakeHttpClient.

    Usage: engine, client = make_engine(responses, covers, api_key="k").
    Passing api_key=None builds a secondary-only engine.
    """

    def _make(
        responses: dict | None = None,
        covers: dict | None = None,
        *,
        api_key: str | None = "test-key",
    ) -> tuple[ReconciliationEngine, FakeHttpClient]:
        client = FakeHttpClient(responses, covers)
        primary = GoogleBooksCatalog(client, api_key) if api_key else None
        engine = ReconciliationEngine(
            primary=primary,
            secondary=OpenLibraryCatalog(client),
            covers=CoverResolver(client),
        )
        return engine, client

    return _make
