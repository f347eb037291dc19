"""
Handles authentication with the Spotify Web API using the
client-credentials grant.
"""

import logging
from typing import TYPE_CHECKING

import aiohttp

from spotify_preview_finder.exceptions import AuthenticationError

if TYPE_CHECKING:
    from .client import SpotifyAPIClient

log = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"


class SpotifyAuthenticator:
    """
    Manages the token exchange for the Spotify API client.
    """

    def __init__(self, api_client: "SpotifyAPIClient"):
        """
        Initializes the authenticator.

        Args:
            api_client: A reference to the main SpotifyAPIClient instance.
        """
        self._api_client = api_client

    async def client_credentials_grant(self) -> str:
        """
        Exchanges the client ID and secret for an access token.

        The token is stored on the API client and also returned. No refresh is
        scheduled; every search call starts from a fresh grant.

        Returns:
            The bearer access token.
        """
        credentials = self._api_client.credentials
        session = await self._api_client.get_session()
        log.debug(f"Requesting access token for client {credentials.client_id[:6]}...")

        async with session.post(
            TOKEN_URL,
            data={"grant_type": "client_credentials"},
            auth=aiohttp.BasicAuth(credentials.client_id, credentials.client_secret),
        ) as r:
            if r.status in (400, 401):
                raise AuthenticationError(
                    "Spotify rejected the client credentials "
                    f"(HTTP {r.status}). Check SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
                )
            r.raise_for_status()
            payload = await r.json()

        token = payload.get("access_token")
        if not token:
            raise AuthenticationError("Token response did not contain an access token.")

        self._api_client.access_token = token
        log.debug(f"Access token obtained (expires in {payload.get('expires_in', '?')}s).")
        return token
