"""Standardized CLI option definitions.

This module provides centralized option definitions so shorthand options
stay consistent across commands.
"""

from pathlib import Path

import typer
from rich.console import Console

from .. import __version__
from ..config import DEFAULT_OUTPUT_DIR, DEFAULT_TIMEOUT
from ..github_client.query import IssueState

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"github-issues-export {__version__}")
        raise typer.Exit()


QUERY_ARGUMENT = typer.Argument(
    ...,
    metavar="QUERY",
    help="Repository as owner/repo, or a single issue as owner/repo#number",
    show_default=False,
)

# Output options
PATH_OPTION = typer.Option(
    DEFAULT_OUTPUT_DIR, "--path", "-p", help="Output directory", file_okay=False
)

TEMPLATE_OPTION = typer.Option(
    None,
    "--template",
    help="Markdown template (Jinja2) replacing the bundled one",
    dir_okay=False,
)

# Filter options
STATE_OPTION = typer.Option(
    IssueState.OPEN,
    "--state",
    "-s",
    help="Fetch issues that are open, closed, or both (ignored for a single issue)",
)

# Authentication and connection options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

API_URL_OPTION = typer.Option(
    None,
    "--api-url",
    help="GitHub API root (defaults to GITHUB_API_URL env var or api.github.com)",
)

TIMEOUT_OPTION = typer.Option(
    DEFAULT_TIMEOUT, "--timeout", min=0.1, help="HTTP timeout in seconds"
)

# Behavior options
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

VERSION_OPTION = typer.Option(
    None,
    "--version",
    help="Show version and exit",
    callback=_version_callback,
    is_eager=True,
)
