"""
Tests for argument resolution and search query construction.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from spotify_preview_finder.core.query_resolver import resolve_query
from spotify_preview_finder.exceptions import ValidationError
from spotify_preview_finder.models.track import Query


class TestSongNameValidation:
    @pytest.mark.parametrize("song_name", ["", None])
    def test_missing_song_name_is_rejected(self, song_name):
        with pytest.raises(ValidationError, match="^Song name is required$"):
            resolve_query(song_name)

    def test_missing_song_name_checked_before_other_arguments(self):
        with pytest.raises(ValidationError, match="Song name is required"):
            resolve_query("", "Ed Sheeran", 3)


class TestOverloads:
    def test_song_only_uses_default_limit(self):
        query = resolve_query("Shape of You")
        assert query == Query(song_name="Shape of You", artist=None, limit=5)

    def test_integer_second_argument_is_a_limit(self):
        query = resolve_query("Shape of You", 3)
        assert query.artist is None
        assert query.limit == 3

    def test_integer_second_argument_ignores_third(self):
        query = resolve_query("Shape of You", 3, 10)
        assert query.limit == 3

    def test_string_second_argument_is_an_artist(self):
        query = resolve_query("Shape of You", "Ed Sheeran")
        assert query.artist == "Ed Sheeran"
        assert query.limit == 5

    def test_artist_with_explicit_limit(self):
        query = resolve_query("Shape of You", "Ed Sheeran", 2)
        assert query.artist == "Ed Sheeran"
        assert query.limit == 2

    def test_empty_artist_is_not_applied(self):
        query = resolve_query("Shape of You", "", 2)
        assert query.artist is None
        assert query.limit == 2
        assert query.search_query == "Shape of You"

    @pytest.mark.parametrize("limit", [0, -3, 10_000])
    def test_limit_is_passed_through_unclamped(self, limit):
        assert resolve_query("Shape of You", limit).limit == limit

    @pytest.mark.parametrize(
        "number, expected", [(3.0, 3), (2.9, 2), (-1.5, -1), (0.0, 0)]
    )
    def test_float_second_argument_is_truncated_to_a_limit(self, number, expected):
        query = resolve_query("Shape of You", number)
        assert query.limit == expected
        assert query.artist is None

    def test_float_limit_with_artist_is_truncated(self):
        assert resolve_query("Shape of You", "Ed Sheeran", 2.0).limit == 2

    @pytest.mark.parametrize("number", [float("nan"), float("inf")])
    def test_non_finite_limit_is_rejected(self, number):
        with pytest.raises(ValidationError, match="finite number"):
            resolve_query("Shape of You", number)

    @pytest.mark.parametrize("bad", [True, ["Ed Sheeran"], {"limit": 3}])
    def test_unsupported_second_argument_is_rejected(self, bad):
        with pytest.raises(ValidationError, match="artist name or a result limit"):
            resolve_query("Shape of You", bad)


class TestSearchQuery:
    def test_plain_query_is_song_name_verbatim(self):
        assert resolve_query("  Shape of You ").search_query == "  Shape of You "

    def test_artist_query_is_field_qualified(self):
        query = resolve_query("Bohemian Rhapsody", "Queen", 1)
        assert query.search_query == 'track:"Bohemian Rhapsody" artist:"Queen"'
        assert 'track:"' in query.search_query
        assert 'artist:"' in query.search_query

    def test_embedded_quotes_are_not_escaped(self):
        query = resolve_query('Say "Hello"', "Adele")
        assert query.search_query == 'track:"Say "Hello"" artist:"Adele"'

    def test_query_is_immutable(self):
        query = resolve_query("Shape of You")
        with pytest.raises(PydanticValidationError):
            query.limit = 10
