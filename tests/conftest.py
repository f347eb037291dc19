import asyncio
from typing import Any
from unittest.mock import MagicMock

import aiohttp
import pytest

from spotify_preview_finder.models.track import TrackCandidate

# ============================================================================
# Catalog data
# ============================================================================


def make_track_json(
    track_id: str = "7qiZfU4dY1lWllzX7mPBI3",
    name: str = "Shape of You",
    artists: tuple[str, ...] = ("Ed Sheeran",),
    album: str = "÷ (Deluxe)",
    release_date: str = "2017-03-03",
    popularity: int = 87,
    duration_ms: int = 233712,
) -> dict[str, Any]:
    """A track object shaped like the Spotify search response items."""
    return {
        "id": track_id,
        "name": name,
        "artists": [{"id": f"artist-{i}", "name": a} for i, a in enumerate(artists)],
        "album": {"id": "album-1", "name": album, "release_date": release_date},
        "popularity": popularity,
        "duration_ms": duration_ms,
        "external_urls": {"spotify": f"https://open.spotify.com/track/{track_id}"},
        "preview_url": None,
        "explicit": False,
    }


def make_candidate(**kwargs: Any) -> TrackCandidate:
    return TrackCandidate.model_validate(make_track_json(**kwargs))


# ============================================================================
# Fake capabilities
# ============================================================================


class FakeCatalog:
    """In-memory CatalogClient that records every call."""

    def __init__(
        self,
        candidates: list[TrackCandidate] | None = None,
        auth_error: Exception | None = None,
        search_error: Exception | None = None,
    ):
        self.candidates = candidates or []
        self.auth_error = auth_error
        self.search_error = search_error
        self.auth_calls = 0
        self.queries: list[str] = []

    async def authenticate(self) -> str:
        self.auth_calls += 1
        if self.auth_error:
            raise self.auth_error
        return "fake-token"

    async def search(self, query: str) -> list[TrackCandidate]:
        self.queries.append(query)
        if self.search_error:
            raise self.search_error
        return list(self.candidates)


class FakeExtractor:
    """
    PreviewSource returning canned URLs per page.

    Values may be a list of URLs or an exception to raise. ``delays`` lets a
    test finish extractions out of order.
    """

    def __init__(
        self,
        pages: dict[str, list[str] | Exception] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.pages = pages or {}
        self.delays = delays or {}
        self.calls: list[str] = []
        self.finished: list[str] = []

    async def extract(self, url: str) -> list[str]:
        self.calls.append(url)
        if delay := self.delays.get(url):
            await asyncio.sleep(delay)
        self.finished.append(url)
        value = self.pages.get(url, [])
        if isinstance(value, Exception):
            raise value
        return list(value)


# ============================================================================
# Fake aiohttp session
# ============================================================================


class FakeResponse:
    def __init__(
        self,
        status: int = 200,
        json_data: Any = None,
        text_data: str = "",
        json_error: Exception | None = None,
    ):
        self.status = status
        self._json = json_data
        self._text = text_data
        self._json_error = json_error
        self.headers: dict[str, str] = {}

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=MagicMock(),
                history=(),
                status=self.status,
                message="Error",
            )

    async def json(self) -> Any:
        if self._json_error:
            raise self._json_error
        return self._json

    async def text(self) -> str:
        return self._text


class FakeSession:
    """
    Stands in for aiohttp.ClientSession.

    ``routes`` maps a URL (without query string) to a FakeResponse or an
    exception raised when the request is made.
    """

    def __init__(self, routes: dict[str, FakeResponse | Exception] | None = None):
        self.routes = routes or {}
        self.closed = False
        self.requests: list[tuple[str, str, dict[str, Any]]] = []

    def _request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append((method, url, kwargs))
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status=404)
        if isinstance(route, Exception):
            raise route
        return route

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("POST", url, **kwargs)

    async def close(self) -> None:
        self.closed = True


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def spotify_env(monkeypatch):
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "test_client_id")
    monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "test_client_secret")


@pytest.fixture
def no_spotify_env(monkeypatch):
    # setenv first so teardown also removes values loaded from .env files
    for name in ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
