"""
Fetches a public Spotify track page and scans its markup for preview
audio URLs hosted on the Spotify CDN.
"""

import asyncio
import logging
from collections.abc import Iterable, Iterator
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup, ParserRejectedMarkup

from spotify_preview_finder.exceptions import ExtractionError

log = logging.getLogger(__name__)

PREVIEW_HOST_MARKER = "p.scdn.co"


def extract_attribute_values(markup: str) -> Iterator[str]:
    """
    Yields every attribute value of every element, in document order.

    Multi-valued attributes such as ``class`` are rejoined with spaces so each
    attribute produces exactly one string.
    """
    soup = BeautifulSoup(markup, "html.parser")
    for element in soup.find_all(True):
        for value in element.attrs.values():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            if value:
                yield value


def filter_preview_urls(
    values: Iterable[str], marker: str = PREVIEW_HOST_MARKER
) -> list[str]:
    """Keeps values containing ``marker``, deduplicated in first-seen order."""
    return list(dict.fromkeys(v for v in values if marker in v))


class PreviewExtractor:
    """
    Scrapes preview URLs from track pages.

    Implements the ``PreviewSource`` protocol.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        marker: str = PREVIEW_HOST_MARKER,
    ):
        self._session = session
        self._owns_session = session is None
        self.marker = marker

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def fetch_page(self, url: str) -> str:
        session = await self._get_session()
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.text()

    async def extract(self, url: str) -> list[str]:
        """
        Fetches ``url`` and returns the distinct preview URLs found on it.

        An empty list means the page loaded but contained no preview links.

        Raises:
            ExtractionError: If the page could not be fetched or parsed.
        """
        try:
            html = await self.fetch_page(url)
            preview_urls = filter_preview_urls(
                extract_attribute_values(html), self.marker
            )
        except (
            aiohttp.ClientError,
            asyncio.TimeoutError,
            ParserRejectedMarkup,
            ValueError,
        ) as e:
            log.debug(f"Preview extraction for {url} failed: {e!r}")
            raise ExtractionError(
                f"Failed to fetch preview URLs: {str(e) or 'Unknown error'}"
            ) from e

        log.debug(f"Found {len(preview_urls)} preview URL(s) on {url}")
        return preview_urls
