"""
Resolve a song (and optional artist) into Spotify preview audio URLs.
"""

__version__ = "1.0.0"

from spotify_preview_finder.core.search_service import (  # noqa: E402
    PreviewSearchService,
    search_and_get_links,
    search_and_get_links_sync,
)
from spotify_preview_finder.models.track import (  # noqa: E402
    Query,
    SearchResult,
    TrackInfo,
)

__all__ = [
    "PreviewSearchService",
    "Query",
    "SearchResult",
    "TrackInfo",
    "__version__",
    "search_and_get_links",
    "search_and_get_links_sync",
]
