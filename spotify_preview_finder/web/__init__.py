"""
Web Scraping Layer.

This package contains modules for fetching and parsing public Spotify track
pages, primarily to extract preview audio URLs.
"""

from .preview_extractor import (
    PREVIEW_HOST_MARKER,
    PreviewExtractor,
    extract_attribute_values,
    filter_preview_urls,
)

__all__ = [
    "PREVIEW_HOST_MARKER",
    "PreviewExtractor",
    "extract_attribute_values",
    "filter_preview_urls",
]
