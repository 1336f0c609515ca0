"""GitHub client package for API interaction."""

from .client import GitHubClient
from .fetcher import MAX_CONCURRENT_FETCHES, IssueFetcher
from .models import (
    GitHubComment,
    GitHubIssue,
    GitHubLabel,
    GitHubUser,
    IssueWithComments,
)
from .query import IssueState, Query, parse_query

__all__ = [
    "GitHubClient",
    "IssueFetcher",
    "MAX_CONCURRENT_FETCHES",
    "GitHubUser",
    "GitHubLabel",
    "GitHubComment",
    "GitHubIssue",
    "IssueWithComments",
    "IssueState",
    "Query",
    "parse_query",
]
