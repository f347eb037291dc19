"""
The search-resolve-scrape pipeline: catalog search followed by concurrent
preview extraction for each retained candidate.
"""

import asyncio
import logging
from typing import Optional, Union

import aiohttp

from spotify_preview_finder.api.client import SpotifyAPIClient
from spotify_preview_finder.api.protocols import CatalogClient, PreviewSource
from spotify_preview_finder.models.track import (
    DEFAULT_LIMIT,
    Query,
    SearchResult,
    TrackCandidate,
    TrackInfo,
)
from spotify_preview_finder.web.preview_extractor import PreviewExtractor

from .query_resolver import resolve_query

log = logging.getLogger(__name__)

NO_SONGS_FOUND = "No songs found"


class PreviewSearchService:
    """Runs one resolved query against a catalog and a preview source."""

    def __init__(self, catalog: CatalogClient, extractor: PreviewSource):
        self.catalog = catalog
        self.extractor = extractor

    async def _enrich(self, candidate: TrackCandidate) -> TrackInfo:
        preview_urls = await self.extractor.extract(candidate.spotify_url)
        return TrackInfo.from_candidate(candidate, preview_urls)

    async def search(self, query: Query) -> SearchResult:
        """
        Searches the catalog and enriches the first ``query.limit`` matches.

        A search with no matches returns a failed result rather than raising.
        Any other failure, including a single failed extraction, propagates once
        every extraction has settled, and discards results that did succeed.
        """
        search_query = query.search_query

        await self.catalog.authenticate()
        candidates = await self.catalog.search(search_query)

        if not candidates:
            log.info(f"No tracks matched {search_query!r}")
            return SearchResult.failure(NO_SONGS_FOUND)

        selected = candidates[: max(query.limit, 0)]
        log.debug(
            f"Extracting previews for {len(selected)} of {len(candidates)} candidates"
        )

        # Every extraction settles before any failure is raised, and gather keeps
        # input order so outcomes line up with their candidates.
        outcomes = await asyncio.gather(
            *(self._enrich(c) for c in selected), return_exceptions=True
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return SearchResult.ok(search_query, list(outcomes))


async def search_and_get_links(
    song_name: Optional[str],
    artist_or_limit: Union[str, int, float, None] = None,
    limit: Union[int, float] = DEFAULT_LIMIT,
    *,
    catalog: Optional[CatalogClient] = None,
    extractor: Optional[PreviewSource] = None,
) -> SearchResult:
    """
    Searches Spotify for a song and collects preview URLs for each match.

    Every failure is reported through the returned ``SearchResult``; this
    coroutine does not raise.

    Args:
        song_name: The track title to search for.
        artist_or_limit: An artist name, or the result limit (legacy form).
        limit: Maximum number of results when an artist is given.
        catalog: Catalog client to use instead of one built from the
            environment.
        extractor: Preview source to use instead of the page scraper.

    Examples:
        >>> await search_and_get_links("Shape of You")
        >>> await search_and_get_links("Shape of You", 3)
        >>> await search_and_get_links("Shape of You", "Ed Sheeran", 2)
    """
    try:
        query = resolve_query(song_name, artist_or_limit, limit)
        async with aiohttp.ClientSession() as session:
            service = PreviewSearchService(
                catalog or SpotifyAPIClient.from_env(session),
                extractor or PreviewExtractor(session),
            )
            return await service.search(query)

    except Exception as e:
        message = str(e) or "Unknown error"
        log.warning(f"Search for {song_name!r} failed: {message}")
        log.debug("Full traceback:", exc_info=True)
        return SearchResult.failure(message)


def search_and_get_links_sync(
    song_name: Optional[str],
    artist_or_limit: Union[str, int, float, None] = None,
    limit: Union[int, float] = DEFAULT_LIMIT,
) -> SearchResult:
    """Blocking wrapper around ``search_and_get_links`` for non-async callers."""
    return asyncio.run(search_and_get_links(song_name, artist_or_limit, limit))
