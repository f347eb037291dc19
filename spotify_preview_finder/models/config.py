"""
Pydantic model for the Spotify client credentials.
Credentials come from the process environment at the moment a client is built.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, field_validator

from spotify_preview_finder.exceptions import ConfigurationError

CLIENT_ID_VAR = "SPOTIFY_CLIENT_ID"
CLIENT_SECRET_VAR = "SPOTIFY_CLIENT_SECRET"


class SpotifyCredentials(BaseModel):
    """A validated client-credentials pair."""

    client_id: str
    client_secret: str

    class Config:
        """Pydantic model configuration."""

        frozen = True
        str_strip_whitespace = True

    @field_validator("client_id", "client_secret")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Credential values cannot be empty.")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SpotifyCredentials":
        """
        Reads both credentials from the environment.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If either variable is unset or blank.
        """
        env = os.environ if environ is None else environ
        client_id = (env.get(CLIENT_ID_VAR) or "").strip()
        client_secret = (env.get(CLIENT_SECRET_VAR) or "").strip()

        if not client_id or not client_secret:
            raise ConfigurationError(
                f"{CLIENT_ID_VAR} and {CLIENT_SECRET_VAR} environment variables are required"
            )
        return cls(client_id=client_id, client_secret=client_secret)

    def __repr__(self) -> str:
        return f"SpotifyCredentials(client_id={self.client_id[:6]!r}...)"
