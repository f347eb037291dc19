"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application, such as credentials and search results.
"""

from .config import SpotifyCredentials
from .track import Query, SearchResult, TrackCandidate, TrackInfo

__all__ = ["Query", "SearchResult", "SpotifyCredentials", "TrackCandidate", "TrackInfo"]
