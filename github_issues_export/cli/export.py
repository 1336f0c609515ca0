"""CLI command for exporting GitHub issues into markdown files."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..config import ExportConfig
from ..errors import ExportError, iter_causes
from ..github_client.client import GitHubClient
from ..github_client.fetcher import IssueFetcher
from ..github_client.models import IssueWithComments
from ..github_client.query import IssueState, Query, parse_query
from ..storage.manager import MarkdownStorage
from ..storage.renderer import MarkdownRenderer
from ..utils.logging import setup_logging
from .options import (
    API_URL_OPTION,
    PATH_OPTION,
    QUERY_ARGUMENT,
    STATE_OPTION,
    TEMPLATE_OPTION,
    TIMEOUT_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
    VERSION_OPTION,
)

console = Console()
err_console = Console(stderr=True)


def export(
    query: str = QUERY_ARGUMENT,
    path: Path = PATH_OPTION,
    state: IssueState = STATE_OPTION,
    token: str | None = TOKEN_OPTION,
    api_url: str | None = API_URL_OPTION,
    template: Path | None = TEMPLATE_OPTION,
    timeout: float = TIMEOUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool | None = VERSION_OPTION,
) -> None:
    """Export issues from GitHub into markdown files.

    Every issue is written to PATH/NNN-title-slug.md together with its
    comments. Nothing is written unless all issues and comments were fetched.

    Examples:
        github-issues-export octocat/Hello-World
        github-issues-export octocat/Hello-World#1 --path docs/issues
        github-issues-export octocat/Hello-World --state all
    """
    setup_logging(verbose)

    try:
        parsed_query = parse_query(query)
        config = ExportConfig.from_env(
            token=token,
            api_url=api_url,
            output_dir=path,
            state=state,
            template_path=template,
            timeout=timeout,
        )
        renderer = MarkdownRenderer(config.template_path)

        if parsed_query.issue_number is not None:
            console.print(f"🔍 Fetching issue {parsed_query}")
        else:
            console.print(
                f"🔍 Fetching {config.state.value} issues from {parsed_query}"
            )

        issues = asyncio.run(fetch_issues_with_comments(config, parsed_query))

        if not issues:
            console.print("❌ No issues found matching the criteria")
            return

        storage = MarkdownStorage(config.output_dir, renderer)
        console.print(f"✅ Found {len(issues)} issues")
        saved_paths = storage.save_issues(issues)

    except ExportError as e:
        report_error(e)
        raise typer.Exit(1)

    show_results(issues, saved_paths)
    console.print(f"✨ Successfully exported {len(saved_paths)} issues!")


async def fetch_issues_with_comments(
    config: ExportConfig, query: Query
) -> list[IssueWithComments]:
    """Fetch the queried issues and all their comments."""
    async with GitHubClient(config) as client:
        fetcher = IssueFetcher(client)
        return await fetcher.resolve(query, config.state)


def report_error(error: ExportError) -> None:
    """Print an error followed by its cause chain on stderr."""
    err_console.print(f"Error: {error}", markup=False, highlight=False, soft_wrap=True)
    for cause in iter_causes(error):
        err_console.print(
            f"Caused by: {cause}", markup=False, highlight=False, soft_wrap=True
        )


def show_results(issues: list[IssueWithComments], paths: list[Path]) -> None:
    """Show a summary table of the exported issues."""
    results_table = Table(title="Export Results")
    results_table.add_column("Issue #", style="cyan")
    results_table.add_column("Title", style="white")
    results_table.add_column("State", style="green")
    results_table.add_column("Comments", justify="right", style="yellow")
    results_table.add_column("File", style="magenta")

    for data, file_path in zip(issues, paths):
        title = data.issue.title
        results_table.add_row(
            str(data.issue.number),
            title[:50] + "..." if len(title) > 50 else title,
            data.issue.state,
            str(len(data.comments)),
            file_path.name,
        )

    console.print(results_table)
