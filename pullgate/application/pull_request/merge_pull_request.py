import logging
from typing import Any

from pullgate.application.exceptions import InvalidRequest
from pullgate.domain.repo.pull_request_repo import (
    IPullRequestRepo,
    PullRequestData,
)

DO_NOT_MERGE_LABEL = "do not merge"


def has_label(pull_request: PullRequestData, name: str) -> bool:
    # Label names are matched exactly, "Do Not Merge" is a different label
    return any(
        label.get("name") == name
        for label in pull_request.get("labels") or []
    )


class MergePullRequest:
    """
    Merge a pull request unless it has been explicitly blocked by adding the
    "do not merge" label to it.
    """

    def __init__(self, pull_request_repo: IPullRequestRepo) -> None:
        self.pull_request_repo = pull_request_repo
        self.logger = logging.getLogger("pullgate")

    async def handle(
        self, owner: str, repo: str, number: int
    ) -> dict[str, Any]:  # type: ignore[misc]
        pull_request = await self.pull_request_repo.get_pull_request(
            owner, repo, number
        )

        if has_label(pull_request, DO_NOT_MERGE_LABEL):
            self.logger.info(
                f"Refusing to merge {owner}/{repo}#{number}: has veto label"
            )

            raise InvalidRequest(
                f'Pull request has a "{DO_NOT_MERGE_LABEL}" label.'
            )

        self.logger.info(f"Merging pull request {owner}/{repo}#{number}")

        return await self.pull_request_repo.merge_pull_request(
            owner, repo, number
        )
