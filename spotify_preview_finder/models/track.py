"""
Pydantic models for search queries, catalog candidates and enriched results.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_LIMIT = 5


class Query(BaseModel):
    """A resolved search request: song name, optional artist and result limit."""

    model_config = ConfigDict(frozen=True)

    song_name: str = Field(..., min_length=1)
    artist: str | None = None
    # Not clamped; non-positive limits simply yield no results.
    limit: int = DEFAULT_LIMIT

    @property
    def search_query(self) -> str:
        """
        The query string sent to the catalog.

        With an artist this is a field-qualified expression. Embedded double
        quotes in either value are passed through verbatim.
        """
        if self.artist:
            return f'track:"{self.song_name}" artist:"{self.artist}"'
        return self.song_name


class ArtistRef(BaseModel):
    name: str


class AlbumRef(BaseModel):
    name: str
    release_date: str = ""


class ExternalUrls(BaseModel):
    spotify: str


class TrackCandidate(BaseModel):
    """A raw track record as returned by the Spotify search endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    artists: list[ArtistRef] = Field(default_factory=list)
    album: AlbumRef
    popularity: int = Field(0, ge=0, le=100)
    duration_ms: int = Field(0, ge=0)
    external_urls: ExternalUrls

    @property
    def spotify_url(self) -> str:
        return self.external_urls.spotify

    @property
    def display_name(self) -> str:
        """Title followed by all artist names in catalog order."""
        artist_names = ", ".join(artist.name for artist in self.artists)
        return f"{self.name} - {artist_names}"


class TrackInfo(BaseModel):
    """A catalog candidate enriched with the preview URLs found on its page."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    spotify_url: str
    preview_urls: list[str] = Field(default_factory=list)
    track_id: str
    album_name: str
    release_date: str
    popularity: int = Field(..., ge=0, le=100)
    duration_ms: int = Field(..., ge=0)

    @classmethod
    def from_candidate(
        cls, candidate: TrackCandidate, preview_urls: list[str]
    ) -> "TrackInfo":
        return cls(
            name=candidate.display_name,
            spotify_url=candidate.spotify_url,
            preview_urls=list(preview_urls),
            track_id=candidate.id,
            album_name=candidate.album.name,
            release_date=candidate.album.release_date,
            popularity=candidate.popularity,
            duration_ms=candidate.duration_ms,
        )


class SearchResult(BaseModel):
    """
    Outcome of a single search.

    Either ``success`` is True with ``search_query`` and ``results`` set, or
    ``success`` is False with ``error`` set and ``results`` empty. Use the
    ``ok`` and ``failure`` constructors rather than building one directly.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    search_query: str | None = None
    results: list[TrackInfo] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def ok(cls, search_query: str, results: list[TrackInfo]) -> "SearchResult":
        return cls(success=True, search_query=search_query, results=results)

    @classmethod
    def failure(cls, error: str) -> "SearchResult":
        return cls(success=False, error=error, results=[])

    def to_dict(self) -> dict:
        """Serializes with camelCase keys, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
