"""
Main entry point for the spotify-preview-finder application.
This module handles top-level setup, exception handling, and CLI invocation.
"""

import asyncio
import logging
import os
import sys

import typer
from rich.console import Console

from spotify_preview_finder.cli.app import app
from spotify_preview_finder.cli.formatters import format_error_with_suggestions
from spotify_preview_finder.exceptions import PreviewFinderError


def main() -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    log = logging.getLogger("spotify_preview_finder")
    console = Console()

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except (KeyboardInterrupt, asyncio.CancelledError):
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(0)
    except PreviewFinderError as e:
        console.print()
        console.print(format_error_with_suggestions(str(e)))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(
            format_error_with_suggestions(
                f"{type(e).__name__}: {e}", title="Unexpected Error"
            )
        )
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
