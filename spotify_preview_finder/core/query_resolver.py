"""
Maps the flexible ``search_and_get_links`` call signature onto a ``Query``.

Supported forms::

    resolve_query("Shape of You")                    # limit 5, no artist
    resolve_query("Shape of You", 3)                 # legacy: limit only
    resolve_query("Shape of You", 3.0)               # floats are truncated
    resolve_query("Shape of You", "Ed Sheeran")      # artist, limit 5
    resolve_query("Shape of You", "Ed Sheeran", 2)   # artist and limit
"""

import math
from typing import Optional, Union

from spotify_preview_finder.exceptions import ValidationError
from spotify_preview_finder.models.track import DEFAULT_LIMIT, Query


def resolve_query(
    song_name: Optional[str],
    artist_or_limit: Union[str, int, float, None] = None,
    limit: Union[int, float] = DEFAULT_LIMIT,
) -> Query:
    """
    Resolves the raw arguments into a canonical query.

    Args:
        song_name: The track title to search for.
        artist_or_limit: An artist name, or (legacy form) the result limit.
        limit: Result limit, only honoured when an artist name is given.

    Raises:
        ValidationError: If the song name is empty or the second argument is
            neither a string nor a number.
    """
    if not song_name:
        raise ValidationError("Song name is required")

    if isinstance(artist_or_limit, str):
        return Query(
            song_name=song_name, artist=artist_or_limit or None, limit=_as_limit(limit)
        )
    if artist_or_limit is None:
        return Query(song_name=song_name, limit=DEFAULT_LIMIT)
    return Query(song_name=song_name, limit=_as_limit(artist_or_limit))


def _as_limit(value: Union[int, float]) -> int:
    """
    Converts a numeric limit to an int, truncating fractional values toward zero.

    Raises:
        ValidationError: For non-numbers (including bool) and non-finite floats.
    """
    # bool is an int subclass and never a meaningful limit.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Second argument must be an artist name or a result limit")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError("Result limit must be a finite number")
        return int(value)
    return value
