"""Tests for markdown storage manager."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from github_issues_export.errors import DirectoryError, TemplateError, WriteFailed
from github_issues_export.github_client.models import GitHubIssue, IssueWithComments
from github_issues_export.storage.manager import MarkdownStorage, ensure_directory
from github_issues_export.storage.renderer import MarkdownRenderer


class TestEnsureDirectory:
    """Test ensure_directory function."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """Test a missing directory is created."""
        target = tmp_path / "md"

        ensure_directory(target)

        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        """Test creating an existing directory is not an error."""
        target = tmp_path / "md"
        target.mkdir()
        (target / "keep.md").write_text("keep", encoding="utf-8")

        ensure_directory(target)
        ensure_directory(target)

        assert (target / "keep.md").read_text(encoding="utf-8") == "keep"

    def test_missing_parent(self, tmp_path: Path) -> None:
        """Test only one directory level is created."""
        target = tmp_path / "missing" / "md"

        with pytest.raises(DirectoryError) as exc_info:
            ensure_directory(target)

        assert exc_info.value.path == target
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_path_is_a_file(self, tmp_path: Path) -> None:
        """Test a regular file in the way is an error."""
        target = tmp_path / "md"
        target.write_text("not a directory", encoding="utf-8")

        with pytest.raises(DirectoryError, match="Could not create output directory"):
            ensure_directory(target)


class TestMarkdownStorage:
    """Test MarkdownStorage class."""

    @pytest.fixture
    def sample_data(
        self, make_issue: Callable[..., dict[str, Any]]
    ) -> IssueWithComments:
        """Create a sample issue without comments."""
        return IssueWithComments(issue=GitHubIssue.model_validate(make_issue()))

    @pytest.fixture
    def storage(self, tmp_path: Path) -> MarkdownStorage:
        """Create storage writing into a temporary directory."""
        return MarkdownStorage(tmp_path / "md", MarkdownRenderer())

    def test_init_creates_directory(self, tmp_path: Path) -> None:
        """Test that initialization creates the output directory."""
        MarkdownStorage(tmp_path / "out", MarkdownRenderer())

        assert (tmp_path / "out").is_dir()

    def test_save_issue(
        self, storage: MarkdownStorage, sample_data: IssueWithComments
    ) -> None:
        """Test saving a single issue."""
        file_path = storage.save_issue(sample_data)

        assert file_path == storage.base_path / "001-found-a-bug.md"
        content = file_path.read_text(encoding="utf-8")
        assert content.startswith("# [Found a bug]")
        assert "I'm having a problem with this." in content

    def test_save_issue_overwrites(
        self,
        storage: MarkdownStorage,
        make_issue: Callable[..., dict[str, Any]],
    ) -> None:
        """Test re-exporting replaces the previous file contents."""
        first = IssueWithComments(
            issue=GitHubIssue.model_validate(make_issue(body="old body"))
        )
        second = IssueWithComments(
            issue=GitHubIssue.model_validate(make_issue(body="new body"))
        )

        storage.save_issue(first)
        file_path = storage.save_issue(second)

        content = file_path.read_text(encoding="utf-8")
        assert "new body" in content
        assert "old body" not in content
        assert len(list(storage.base_path.iterdir())) == 1

    def test_save_issue_write_failure(
        self, storage: MarkdownStorage, sample_data: IssueWithComments
    ) -> None:
        """Test write errors are reported with the target path."""
        blocker = storage.base_path / "001-found-a-bug.md"
        blocker.mkdir()

        with pytest.raises(WriteFailed) as exc_info:
            storage.save_issue(sample_data)

        assert exc_info.value.path == blocker
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_save_issue_render_failure(
        self, tmp_path: Path, sample_data: IssueWithComments
    ) -> None:
        """Test rendering errors propagate and nothing is written."""
        renderer = Mock(spec=MarkdownRenderer)
        renderer.render.side_effect = TemplateError("broken")
        storage = MarkdownStorage(tmp_path / "md", renderer)

        with pytest.raises(TemplateError):
            storage.save_issue(sample_data)

        assert list(storage.base_path.iterdir()) == []

    def test_save_issues(
        self,
        storage: MarkdownStorage,
        make_issue: Callable[..., dict[str, Any]],
    ) -> None:
        """Test saving multiple issues, one file per issue number."""
        issues = [
            IssueWithComments(issue=GitHubIssue.model_validate(make_issue(2, "Two"))),
            IssueWithComments(issue=GitHubIssue.model_validate(make_issue(1, "One"))),
            IssueWithComments(
                issue=GitHubIssue.model_validate(make_issue(1234, "Big one"))
            ),
        ]

        paths = storage.save_issues(issues)

        assert [path.name for path in paths] == [
            "002-two.md",
            "001-one.md",
            "1234-big-one.md",
        ]
        assert sorted(p.name for p in storage.base_path.iterdir()) == [
            "001-one.md",
            "002-two.md",
            "1234-big-one.md",
        ]
