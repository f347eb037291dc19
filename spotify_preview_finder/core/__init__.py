"""
Core search pipeline.

`resolve_query` turns the caller's arguments into a `Query`, and
`PreviewSearchService` runs it against the catalog, delegating each
candidate's page to the preview extractor.
"""

from .query_resolver import resolve_query
from .search_service import PreviewSearchService, search_and_get_links

__all__ = ["PreviewSearchService", "resolve_query", "search_and_get_links"]
