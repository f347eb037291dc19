"""
Async client for the Spotify Web API search endpoint.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from spotify_preview_finder.exceptions import AuthenticationError, CatalogSearchError
from spotify_preview_finder.models.config import SpotifyCredentials
from spotify_preview_finder.models.track import TrackCandidate

from .auth import SpotifyAuthenticator

log = logging.getLogger(__name__)


class SpotifyAPIClient:
    """
    Minimal async client for the Spotify Web API (v1).

    Implements the ``CatalogClient`` protocol: ``authenticate()`` performs the
    client-credentials grant and ``search()`` returns parsed track candidates.
    The client holds no state beyond the token of the current call.
    """

    BASE_URL = "https://api.spotify.com/v1/"

    def __init__(
        self,
        credentials: SpotifyCredentials,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initializes the API client.

        Args:
            credentials: The client ID and secret.
            session: An existing session to share. When omitted the client opens
                its own and closes it in ``close()``.
        """
        self.credentials = credentials
        self.access_token: Optional[str] = None

        self._session = session
        self._owns_session = session is None
        self._authenticator = SpotifyAuthenticator(self)

    @classmethod
    def from_env(
        cls, session: Optional[aiohttp.ClientSession] = None
    ) -> "SpotifyAPIClient":
        """Builds a client from SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET."""
        return cls(SpotifyCredentials.from_env(), session=session)

    async def get_session(self) -> aiohttp.ClientSession:
        """Returns the active session, creating one if the client owns it."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Closes the session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "SpotifyAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def authenticate(self) -> str:
        return await self._authenticator.client_credentials_grant()

    async def api_call(self, endpoint: str, **params: Any) -> Dict[str, Any]:
        """
        Makes an authenticated GET request and returns the decoded JSON body.
        """
        if not self.access_token:
            raise AuthenticationError(
                "No access token available. Call authenticate() first."
            )

        session = await self.get_session()
        start_time = time.monotonic()

        async with session.get(
            self.BASE_URL + endpoint,
            params=params,
            headers={"Authorization": f"Bearer {self.access_token}"},
        ) as r:
            duration_ms = (time.monotonic() - start_time) * 1000
            log.debug(f"GET {endpoint} -> {r.status} in {duration_ms:.0f}ms")

            if r.status == 401:
                raise AuthenticationError("The access token is invalid or has expired.")
            r.raise_for_status()

            try:
                return await r.json()
            except (aiohttp.ContentTypeError, ValueError) as e:
                raise CatalogSearchError(
                    f"Spotify returned a non-JSON response for {endpoint}."
                ) from e

    async def search_tracks(self, query: str) -> Dict[str, Any]:
        return await self.api_call("search", q=query, type="track")

    async def search(self, query: str) -> List[TrackCandidate]:
        """
        Searches for tracks and parses the items into candidates.

        A payload without a ``tracks`` section is treated as no matches.
        """
        payload = await self.search_tracks(query)
        items = (payload.get("tracks") or {}).get("items") or []
        log.debug(f"Search for {query!r} returned {len(items)} tracks")

        try:
            # Spotify may return null placeholders for unavailable items.
            return [TrackCandidate.model_validate(item) for item in items if item]
        except PydanticValidationError as e:
            raise CatalogSearchError(
                f"Unexpected track record in search response: {e.error_count()} "
                "validation error(s)"
            ) from e
