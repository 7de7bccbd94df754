from abc import ABC, abstractmethod
from typing import Any

# Pull requests are passed through exactly as the provider returns them
PullRequestData = dict[str, Any]  # type: ignore[misc]


class IPullRequestRepo(ABC):
    @abstractmethod
    async def list_pull_requests(
        self, owner: str, repo: str
    ) -> list[PullRequestData]:
        """
        Only the first page of results is returned, no pagination is done.
        """

    @abstractmethod
    async def get_pull_request(
        self, owner: str, repo: str, number: int
    ) -> PullRequestData:
        ...

    @abstractmethod
    async def merge_pull_request(
        self, owner: str, repo: str, number: int
    ) -> dict[str, Any]:  # type: ignore[misc]
        ...
