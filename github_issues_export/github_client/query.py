"""Parsing of the ``owner/repo[#number]`` query argument."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ArgumentError

_ISSUE_NUMBER_PATTERN = re.compile(r"[0-9]+")


class IssueState(str, Enum):
    """Issue state filter sent as the ``state`` query parameter."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class Query(BaseModel):
    """Repository, and optionally a single issue, to export."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Repository owner (user or organization)")
    repo: str = Field(..., description="Repository name")
    issue_number: int | None = Field(None, description="Single issue to export")

    def __str__(self) -> str:
        if self.issue_number is None:
            return f"{self.owner}/{self.repo}"
        return f"{self.owner}/{self.repo}#{self.issue_number}"


def parse_query(text: str) -> Query:
    """Parse a query of the form ``owner/repo`` or ``owner/repo#number``.

    Args:
        text: Query string as given on the command line

    Returns:
        Parsed Query

    Raises:
        ArgumentError: If the string is not a valid query
    """
    parts = text.split("/")
    if len(parts) != 2:
        raise ArgumentError(f"Wrong argument: {text}. Expected owner/repo[#number]")

    owner, rest = parts
    repo_parts = rest.split("#")
    if len(repo_parts) > 2:
        raise ArgumentError(f"Wrong argument: {text}. Expected owner/repo[#number]")

    repo = repo_parts[0]
    if not owner or not repo:
        raise ArgumentError(
            f"Wrong argument: {text}. Owner and repository must be non-empty"
        )

    issue_number = None
    if len(repo_parts) == 2:
        raw_number = repo_parts[1]
        if not _ISSUE_NUMBER_PATTERN.fullmatch(raw_number) or int(raw_number) == 0:
            raise ArgumentError(
                f"Wrong argument: {text}. Issue number must be a positive integer"
            )
        issue_number = int(raw_number)

    return Query(owner=owner, repo=repo, issue_number=issue_number)
