"""GitHub REST API client using httpx."""

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import ArgumentError, MalformedResponse, RequestFailed
from .models import GitHubComment, GitHubIssue
from .query import IssueState, Query

if TYPE_CHECKING:
    from ..config import ExportConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubClient:
    """Async GitHub API client with bearer token authentication.

    A single client is shared by all concurrent fetches; use it as an async
    context manager so the underlying connection pool is closed.
    """

    def __init__(
        self,
        config: "ExportConfig",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize GitHub client with authentication.

        Args:
            config: Export configuration carrying the token and API root
            transport: Optional httpx transport, used by tests to mock GitHub
        """
        self.api_url = config.api_url.rstrip("/")
        self.headers = {
            "User-Agent": config.user_agent,
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._client = httpx.AsyncClient(
            headers=self.headers,
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def get(self, endpoint: str, response_type: type[T]) -> T:
        """GET an endpoint and decode the JSON body into ``response_type``.

        Args:
            endpoint: Absolute API URL
            response_type: Model class, or ``list[Model]`` for array responses

        Returns:
            Decoded response

        Raises:
            RequestFailed: On transport errors or non-success status codes
            MalformedResponse: If the body does not match ``response_type``
        """
        logger.debug("GET %s", endpoint)
        try:
            response = await self._client.get(endpoint)
        except httpx.HTTPError as e:
            raise RequestFailed(str(e)) from e

        if not response.is_success:
            body = response.content.decode("utf-8", errors="replace")
            logger.debug("GET %s failed with %s", endpoint, response.status_code)
            raise RequestFailed(body, status_code=response.status_code)

        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponse(endpoint) from e

    async def fetch_issue(self, query: Query) -> GitHubIssue:
        """Get a single issue by number."""
        if query.issue_number is None:
            raise ArgumentError(f"Query {query} does not name an issue")

        return await self.get(
            f"{self.api_url}/repos/{query.owner}/{query.repo}"
            f"/issues/{query.issue_number}",
            GitHubIssue,
        )

    async def fetch_issues(
        self, query: Query, state: IssueState = IssueState.OPEN
    ) -> list[GitHubIssue]:
        """List repository issues filtered by state (first page only)."""
        return await self.get(
            f"{self.api_url}/repos/{query.owner}/{query.repo}"
            f"/issues?state={state.value}",
            list[GitHubIssue],
        )

    async def fetch_comments(self, issue: GitHubIssue) -> list[GitHubComment]:
        """Get all comments of an issue, in API order."""
        return await self.get(issue.comments_url, list[GitHubComment])
