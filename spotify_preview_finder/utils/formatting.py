"""
Helper functions for formatting data into human-readable strings.
"""


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '3m 54s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def format_track_duration(duration_ms: int) -> str:
    """Formats a track length given in milliseconds, rounded to the second."""
    return format_duration(round(duration_ms / 1000))


def parse_batch_line(line: str) -> tuple[str, str | None] | None:
    """
    Parses one ``song[,artist]`` line of a batch file.

    Returns None for blank lines and ``#`` comments. Only the last comma splits
    song from artist, so titles containing commas still work when an artist is
    given.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if "," in line:
        song, artist = (part.strip() for part in line.rsplit(",", 1))
        return song, artist or None
    return line, None
