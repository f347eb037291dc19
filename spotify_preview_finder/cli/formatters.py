"""
Functions for formatting and displaying search results in the console using Rich.
"""

import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spotify_preview_finder.models.track import SearchResult, TrackInfo
from spotify_preview_finder.utils.formatting import format_track_duration

# Matched against the failure message, since results carry no exception type.
SUGGESTIONS_BY_MESSAGE = {
    "Song name is required": [
        "• Pass the song title as the first argument.",
    ],
    "environment variables are required": [
        "• Export SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET.",
        "• Or put them in a .env file and pass it with --env-file.",
        "• Create an app at https://developer.spotify.com/dashboard to get them.",
    ],
    "rejected the client credentials": [
        "• Verify the client ID and secret of your Spotify app.",
        "• Run `spotify-preview-finder diagnose` to test them.",
    ],
    "No songs found": [
        "• Check the spelling of the song name.",
        "• Try again without --artist, or with a shorter title.",
    ],
    "Failed to fetch preview URLs": [
        "• A track page could not be loaded from open.spotify.com.",
        "• Check your internet connection and try again.",
        "• Lower --limit to fetch fewer pages.",
    ],
}


def get_suggestions(message: str) -> list[str]:
    for needle, suggestions in SUGGESTIONS_BY_MESSAGE.items():
        if needle in message:
            return suggestions
    return ["• Run the command with -vv for detailed logs."]


def format_error_with_suggestions(message: str, title: str = "Search Failed") -> Panel:
    """Formats a failure message with actionable suggestions into a Rich Panel."""
    error_text = Text()
    error_text.append("Error: ", style="bold red")
    error_text.append(message)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(get_suggestions(message))))

    return Panel(
        content,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
        expand=False,
    )


def build_results_table(result: SearchResult) -> Table:
    """Builds a table with one row per track, preview URLs listed in the last column."""
    table = Table(
        title=f"Results for [cyan]{escape(result.search_query or '')}[/cyan]",
        box=box.ROUNDED,
        show_lines=True,
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Track", style="bold")
    table.add_column("Album")
    table.add_column("Released", style="dim")
    table.add_column("Length", justify="right")
    table.add_column("Pop.", justify="right", style="magenta")
    table.add_column("Preview URLs", overflow="fold")

    for i, track in enumerate(result.results, 1):
        table.add_row(
            str(i),
            f"{escape(track.name)}\n[dim]{escape(track.spotify_url)}[/dim]",
            escape(track.album_name),
            escape(track.release_date),
            format_track_duration(track.duration_ms),
            f"{track.popularity}/100",
            _format_preview_urls(track),
        )
    return table


def _format_preview_urls(track: TrackInfo) -> str:
    if not track.preview_urls:
        return "[yellow]none found[/yellow]"
    return "\n".join(f"[green]{escape(url)}[/green]" for url in track.preview_urls)


def print_search_result(result: SearchResult, console: Console | None = None) -> None:
    """Prints a successful result as a table, or a failure panel otherwise."""
    console = console or Console()
    if not result.success:
        console.print(format_error_with_suggestions(result.error or "Unknown error"))
        return

    console.print(build_results_table(result))
    with_previews = sum(1 for track in result.results if track.preview_urls)
    console.print(
        f"[green]✓ {len(result.results)} track(s), "
        f"{with_previews} with preview URLs.[/green]"
    )


def print_search_result_json(result: SearchResult, console: Console | None = None) -> None:
    """Prints the camelCase JSON form of the result."""
    console = console or Console()
    console.print_json(json.dumps(result.to_dict()))


def format_batch_line(
    song: str, artist: str | None, result: SearchResult
) -> Text:
    """One summary line for a batch entry: found track or the failure reason."""
    label = f'"{song}"' + (f" by {artist}" if artist else "")
    line = Text(f"{label}: ")
    if result.success and result.results:
        track = result.results[0]
        line.append(f"✓ {track.name}", style="green")
        line.append(
            f" ({track.album_name}, {len(track.preview_urls)} preview URL(s))",
            style="dim",
        )
    else:
        line.append(f"✗ {result.error or 'Not found'}", style="red")
    return line
