"""Main CLI entry point."""

import typer
from dotenv import load_dotenv

from .export import export

# Load GITHUB_TOKEN and friends from a local .env file
load_dotenv()

app = typer.Typer(
    name="github-issues-export",
    help="Export issues from GitHub into markdown files.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(name="export", context_settings={"help_option_names": ["-h", "--help"]})(
    export
)


if __name__ == "__main__":
    app()
