"""
Capability interfaces the search pipeline depends on.

The pipeline only ever talks to these protocols, so tests (or another catalog)
can substitute their own implementations.
"""

from typing import Protocol

from spotify_preview_finder.models.track import TrackCandidate


class CatalogClient(Protocol):
    """A credentialed music catalog that can be searched for tracks."""

    async def authenticate(self) -> str:
        """Obtains a short-lived access token, raising on failure."""
        ...

    async def search(self, query: str) -> list[TrackCandidate]:
        """Returns the matching tracks in catalog order (possibly empty)."""
        ...


class PreviewSource(Protocol):
    """Something that can turn a public track page URL into preview URLs."""

    async def extract(self, url: str) -> list[str]: ...
