"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures.
Only the fields consumed by the export are declared; anything else in the
payload is ignored. Timestamps are kept as the strings GitHub sends.
API Reference: https://docs.github.com/en/rest/issues
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")
    url: str = Field(..., description="API URL of the user")
    html_url: str = Field(..., description="Profile page URL")
    avatar_url: str | None = Field(None, description="Avatar image URL")
    gravatar_id: str | None = Field(None, description="Legacy gravatar identifier")
    site_admin: bool = Field(False, description="Whether the user is a site admin")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    url: str = Field(..., description="API URL of the label")
    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubComment(BaseModel):
    """GitHub comment model representing issue comments.

    Maps to GitHub REST API Issue Comment object.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    id: int = Field(..., description="Unique comment identifier (integer)")
    url: str = Field(..., description="API URL of the comment")
    html_url: str = Field(..., description="Web URL of the comment")
    body: str | None = Field(None, description="Text content of the comment")
    user: GitHubUser = Field(..., description="Comment author details")
    created_at: str = Field(..., description="Timestamp of comment creation (ISO 8601)")
    updated_at: str = Field(
        ..., description="Timestamp of last comment update (ISO 8601)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    id: int = Field(..., description="Unique issue identifier (integer)")
    number: int = Field(..., description="Issue number within the repository (integer)")
    url: str = Field(..., description="API URL of the issue")
    html_url: str = Field(..., description="Web URL of the issue")
    comments_url: str = Field(..., description="API URL listing the issue comments")
    labels_url: str | None = Field(None, description="API URL template for labels")
    events_url: str | None = Field(None, description="API URL listing issue events")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    user: GitHubUser = Field(..., description="Creator/author of the issue")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    assignee: GitHubUser | None = Field(None, description="Assigned user, if any")
    locked: bool = Field(False, description="Whether the conversation is locked")
    comments: int = Field(0, description="Number of comments on the issue")
    created_at: str = Field(..., description="Timestamp of issue creation (ISO 8601)")
    updated_at: str = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )
    closed_at: str | None = Field(None, description="Timestamp of closing (ISO 8601)")


class IssueWithComments(BaseModel):
    """An issue paired with its comments, in the order GitHub returned them.

    This is the unit handed to the markdown renderer.
    """

    model_config = ConfigDict(frozen=True)

    issue: GitHubIssue = Field(..., description="The exported issue")
    comments: list[GitHubComment] = Field(
        default_factory=list, description="Comments in API response order"
    )
