"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class PreviewFinderError(Exception):
    """Base exception for all application-specific errors."""


class ValidationError(PreviewFinderError):
    """Raised when the search arguments cannot be resolved into a query."""


class ConfigurationError(PreviewFinderError):
    """Raised when the Spotify client credentials are missing."""


class AuthenticationError(PreviewFinderError):
    """Raised when the client-credentials grant is rejected by Spotify."""


class CatalogSearchError(PreviewFinderError):
    """Raised when the Spotify search endpoint returns an unusable payload."""


class ExtractionError(PreviewFinderError):
    """
    Raised when a track page cannot be fetched or parsed for preview URLs.
    """
