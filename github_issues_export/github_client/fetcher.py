"""Fetch issues together with their comments."""

import asyncio
import logging

from .client import GitHubClient
from .models import GitHubIssue, IssueWithComments
from .query import IssueState, Query

logger = logging.getLogger(__name__)

# Upper bound on comment requests in flight at once
MAX_CONCURRENT_FETCHES = 8


class IssueFetcher:
    """Resolves a query into issues paired with their comments."""

    def __init__(
        self, client: GitHubClient, max_concurrency: int = MAX_CONCURRENT_FETCHES
    ):
        """Initialize the fetcher.

        Args:
            client: Shared GitHub client
            max_concurrency: Maximum number of comment requests in flight
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.client = client
        self.max_concurrency = max_concurrency

    async def fetch_issue_set(
        self, query: Query, state: IssueState = IssueState.OPEN
    ) -> list[GitHubIssue]:
        """Return the single queried issue, or all issues matching ``state``."""
        if query.issue_number is not None:
            return [await self.client.fetch_issue(query)]
        return await self.client.fetch_issues(query, state)

    async def resolve(
        self, query: Query, state: IssueState = IssueState.OPEN
    ) -> list[IssueWithComments]:
        """Fetch the issue set and the comments of every issue.

        Comment requests run concurrently, at most ``max_concurrency`` at a
        time. Results come back in completion order. The first failure cancels
        all outstanding requests and is re-raised, so either every issue is
        returned or none is.

        Args:
            query: Repository and optional issue number
            state: State filter, ignored when the query names an issue

        Returns:
            One IssueWithComments per issue
        """
        issues = await self.fetch_issue_set(query, state)
        logger.info("Fetched %d issue(s) for %s", len(issues), query)
        if not issues:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)
        tasks = [
            asyncio.create_task(self._fetch_with_comments(issue, semaphore))
            for issue in issues
        ]

        results: list[IssueWithComments] = []
        try:
            for next_done in asyncio.as_completed(tasks):
                results.append(await next_done)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return results

    async def _fetch_with_comments(
        self, issue: GitHubIssue, semaphore: asyncio.Semaphore
    ) -> IssueWithComments:
        async with semaphore:
            logger.debug("Fetching comments for issue #%d", issue.number)
            comments = await self.client.fetch_comments(issue)
        return IssueWithComments(issue=issue, comments=comments)
