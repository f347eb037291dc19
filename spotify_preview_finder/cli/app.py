"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
from pathlib import Path

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from spotify_preview_finder import __version__
from spotify_preview_finder.api.client import SpotifyAPIClient
from spotify_preview_finder.core.search_service import search_and_get_links
from spotify_preview_finder.exceptions import PreviewFinderError
from spotify_preview_finder.models.config import SpotifyCredentials
from spotify_preview_finder.models.track import DEFAULT_LIMIT, SearchResult
from spotify_preview_finder.utils.formatting import parse_batch_line

from .formatters import (
    format_batch_line,
    format_error_with_suggestions,
    print_search_result,
    print_search_result_json,
)

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=False,
        )
    ],
)
log = logging.getLogger("spotify_preview_finder")

app = typer.Typer(
    name="spotify-preview-finder",
    help=(
        "Find Spotify preview audio URLs for a song. Use 'spotify-preview-finder"
        " <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Load SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET from this file.",
        exists=True,
        dir_okay=False,
    ),
):
    """Spotify Preview Finder CLI"""
    if version:
        console.print(
            f"[bold]spotify-preview-finder[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("spotify_preview_finder").setLevel(log_level)

    # Variables already set in the environment take precedence.
    dotenv_path = str(env_file) if env_file else find_dotenv(usecwd=True)
    if dotenv_path and load_dotenv(dotenv_path):
        log.debug(f"Loaded environment from {dotenv_path}")

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


async def _run_search(
    song: str, artist: str | None, limit: int
) -> SearchResult:
    if artist:
        return await search_and_get_links(song, artist, limit)
    return await search_and_get_links(song, limit)


@app.command()
def search(
    song: str = typer.Argument(..., help="The song title to search for."),
    artist: str | None = typer.Option(
        None, "--artist", "-a", help="Restrict the search to this artist."
    ),
    limit: int = typer.Option(
        DEFAULT_LIMIT, "--limit", "-n", help="Maximum number of tracks to return."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the raw result as JSON instead of a table."
    ),
):
    """Search for a song and list the preview URLs of each match."""
    result = asyncio.run(_run_search(song, artist, limit))

    if as_json:
        print_search_result_json(result, console)
    else:
        print_search_result(result, console)

    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def batch(
    file: Path = typer.Argument(
        ...,
        help="File with one 'song' or 'song, artist' per line.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
):
    """Look up the best match for every song listed in a file."""
    entries = [
        entry
        for entry in map(parse_batch_line, file.read_text(encoding="utf-8").splitlines())
        if entry
    ]
    if not entries:
        console.print("[yellow]⚠️  No songs found in the batch file.[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[dim]Searching for {len(entries)} song(s)...[/dim]\n")

    async def _batch_async() -> int:
        found = 0
        for song, artist in entries:
            result = await _run_search(song, artist, 1)
            if result.success and result.results:
                found += 1
            console.print(format_batch_line(song, artist, result))
        return found

    found = asyncio.run(_batch_async())
    console.print(f"\n[bold]Found {found}/{len(entries)} song(s).[/bold]")
    if found == 0:
        raise typer.Exit(code=1)


@app.command()
def diagnose():
    """Diagnose credential and connectivity issues."""
    console.print("\n[bold cyan]Running diagnostics...[/bold cyan]\n")
    try:
        credentials = SpotifyCredentials.from_env()
        console.print("[green]✓[/] SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET are set.")
    except PreviewFinderError as e:
        console.print(format_error_with_suggestions(str(e), title="Diagnostics Failed"))
        raise typer.Exit(code=1) from e

    console.print("[dim]Requesting an access token from Spotify...[/dim]")

    async def test_token() -> bool:
        try:
            async with SpotifyAPIClient(credentials) as client:
                await client.authenticate()
            console.print("[green]✓[/] Access token obtained.")
            return True
        except Exception as e:
            console.print(
                format_error_with_suggestions(
                    str(e) or "Unknown error", title="Diagnostics Failed"
                )
            )
            log.debug("Full traceback:", exc_info=True)
            return False

    if not asyncio.run(test_token()):
        raise typer.Exit(code=1)
    console.print(
        "\n[bold green]✓ All checks passed! Your setup looks good.[/bold green]\n"
    )
