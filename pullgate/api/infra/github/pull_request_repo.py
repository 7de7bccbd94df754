import logging
from typing import Any

from githubkit import GitHub, TokenAuthStrategy
from githubkit.exception import GitHubException

from pullgate.application.exceptions import RemoteCallError
from pullgate.domain.repo.pull_request_repo import (
    IPullRequestRepo,
    PullRequestData,
)

logger = logging.getLogger("pullgate")


def get_github_client(token: str, **options: Any) -> GitHub[TokenAuthStrategy]:  # type: ignore[misc]
    # Requests are sent exactly once, a failed merge is never replayed
    return GitHub(token, auto_retry=False, **options)


class GitHubPullRequestRepo(IPullRequestRepo):
    """
    Pull request operations backed by the GitHub REST API. The raw JSON from
    GitHub is returned as-is so that callers get exactly what GitHub sent.
    """

    def __init__(self, github: GitHub[TokenAuthStrategy]) -> None:
        self.github = github

    async def list_pull_requests(
        self, owner: str, repo: str
    ) -> list[PullRequestData]:
        logger.debug(f"Listing pull requests for {owner}/{repo}")

        try:
            resp = await self.github.rest.pulls.async_list(owner, repo)

        except GitHubException as ex:
            raise RemoteCallError(
                f"Could not list pull requests for {owner}/{repo}"
            ) from ex

        return resp.json()  # type: ignore[no-any-return]

    async def get_pull_request(
        self, owner: str, repo: str, number: int
    ) -> PullRequestData:
        logger.debug(f"Fetching pull request {owner}/{repo}#{number}")

        try:
            resp = await self.github.rest.pulls.async_get(owner, repo, number)

        except GitHubException as ex:
            raise RemoteCallError(
                f"Could not fetch pull request {owner}/{repo}#{number}"
            ) from ex

        return resp.json()  # type: ignore[no-any-return]

    async def merge_pull_request(
        self, owner: str, repo: str, number: int
    ) -> dict[str, Any]:  # type: ignore[misc]
        try:
            resp = await self.github.rest.pulls.async_merge(owner, repo, number)

        except GitHubException as ex:
            raise RemoteCallError(
                f"Could not merge pull request {owner}/{repo}#{number}"
            ) from ex

        return resp.json()  # type: ignore[no-any-return]
