"""Test configuration and fixtures."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from github_issues_export.config import ExportConfig

API_URL = "https://api.github.com"


def user_payload(login: str = "octocat", user_id: int = 1) -> dict[str, Any]:
    """GitHub user as returned by the REST API."""
    return {
        "login": login,
        "id": user_id,
        "avatar_url": f"https://github.com/images/{login}.gif",
        "gravatar_id": "",
        "url": f"{API_URL}/users/{login}",
        "html_url": f"https://github.com/{login}",
        "followers_url": f"{API_URL}/users/{login}/followers",
        "type": "User",
        "site_admin": False,
    }


@pytest.fixture
def make_issue() -> Callable[..., dict[str, Any]]:
    """Factory for GitHub issue payloads."""

    def _make(
        number: int = 1,
        title: str = "Found a bug",
        body: str | None = "I'm having a problem with this.",
        state: str = "open",
        repo: str = "octocat/Hello-World",
    ) -> dict[str, Any]:
        issue_url = f"{API_URL}/repos/{repo}/issues/{number}"
        return {
            "id": 1000 + number,
            "node_id": "MDU6SXNzdWUx",
            "url": issue_url,
            "repository_url": f"{API_URL}/repos/{repo}",
            "labels_url": f"{issue_url}/labels{{/name}}",
            "comments_url": f"{issue_url}/comments",
            "events_url": f"{issue_url}/events",
            "html_url": f"https://github.com/{repo}/issues/{number}",
            "number": number,
            "state": state,
            "title": title,
            "body": body,
            "user": user_payload(),
            "labels": [
                {
                    "id": 208045946,
                    "url": f"{API_URL}/repos/{repo}/labels/bug",
                    "name": "bug",
                    "description": "Something isn't working",
                    "color": "f29513",
                    "default": True,
                }
            ],
            "assignee": None,
            "locked": False,
            "comments": 0,
            "closed_at": None,
            "created_at": "2011-04-22T13:33:48Z",
            "updated_at": "2011-04-22T13:33:48Z",
        }

    return _make


@pytest.fixture
def make_comment() -> Callable[..., dict[str, Any]]:
    """Factory for GitHub issue comment payloads."""

    def _make(
        comment_id: int = 1,
        body: str = "Me too",
        login: str = "hubot",
        repo: str = "octocat/Hello-World",
        number: int = 1,
    ) -> dict[str, Any]:
        return {
            "id": comment_id,
            "url": f"{API_URL}/repos/{repo}/issues/comments/{comment_id}",
            "html_url": (
                f"https://github.com/{repo}/issues/{number}#issuecomment-{comment_id}"
            ),
            "body": body,
            "user": user_payload(login=login, user_id=2),
            "created_at": "2011-04-14T16:00:49Z",
            "updated_at": "2011-04-14T16:00:49Z",
            "author_association": "COLLABORATOR",
        }

    return _make


@pytest.fixture
def config(tmp_path: Path) -> ExportConfig:
    """Export configuration writing into a temporary directory."""
    return ExportConfig(token="test_token", output_dir=tmp_path / "md")


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Put the root logger back the way it was after CLI runs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
