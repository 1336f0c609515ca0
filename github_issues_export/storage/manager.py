"""Storage manager writing exported issues as markdown files."""

import logging
from pathlib import Path

from rich.console import Console

from ..errors import DirectoryError, WriteFailed
from ..github_client.models import IssueWithComments
from ..utils.text import issue_filename
from .renderer import MarkdownRenderer

console = Console()
logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> None:
    """Create the output directory if it does not exist yet.

    Only the last path component is created; a missing parent is an error.

    Raises:
        DirectoryError: If the directory cannot be created, or the path
            exists but is not a directory
    """
    try:
        path.mkdir(exist_ok=True)
    except OSError as e:
        raise DirectoryError(path) from e


class MarkdownStorage:
    """Writes one markdown file per issue into an output directory."""

    def __init__(self, base_path: Path, renderer: MarkdownRenderer):
        """Initialize storage, creating the output directory.

        Args:
            base_path: Directory receiving the markdown files
            renderer: Renderer producing the file contents
        """
        self.base_path = Path(base_path)
        self.renderer = renderer
        ensure_directory(self.base_path)

    def _get_file_path(self, data: IssueWithComments) -> Path:
        """Get full file path for an exported issue."""
        return self.base_path / issue_filename(data.issue.number, data.issue.title)

    def save_issue(self, data: IssueWithComments) -> Path:
        """Render an issue and write it, replacing any existing file.

        Args:
            data: Issue and comments to export

        Returns:
            Path to the written file

        Raises:
            TemplateError: If rendering fails
            WriteFailed: If the file cannot be written
        """
        markdown = self.renderer.render(data)
        file_path = self._get_file_path(data)

        console.print(f"Writing {file_path}", markup=False, soft_wrap=True)
        try:
            file_path.write_text(markdown, encoding="utf-8")
        except OSError as e:
            raise WriteFailed(file_path) from e

        logger.debug(
            "Wrote issue #%d with %d comment(s)", data.issue.number, len(data.comments)
        )
        return file_path

    def save_issues(self, issues: list[IssueWithComments]) -> list[Path]:
        """Write issues one after another, stopping at the first failure."""
        return [self.save_issue(data) for data in issues]
