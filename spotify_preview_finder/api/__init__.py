"""
Spotify API Layer.

This package handles all communication with the Spotify Web API.
"""

from .auth import SpotifyAuthenticator
from .client import SpotifyAPIClient
from .protocols import CatalogClient, PreviewSource

__all__ = ["CatalogClient", "PreviewSource", "SpotifyAPIClient", "SpotifyAuthenticator"]
