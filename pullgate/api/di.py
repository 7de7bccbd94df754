import logging

from pullgate.api.infra.github.pull_request_repo import (
    GitHubPullRequestRepo,
    get_github_client,
)
from pullgate.api.infra.repository_repo import RepositoryRepo
from pullgate.api.settings import GitHubSettings
from pullgate.domain.repo.pull_request_repo import IPullRequestRepo
from pullgate.domain.repo.repository_repo import IRepositoryRepo

logger = logging.getLogger("pullgate")


class DiContainer:  # pragma: no cover
    @classmethod
    def repository_repo(cls) -> IRepositoryRepo:
        return RepositoryRepo()

    github_pull_request_repo: IPullRequestRepo | None = None

    @classmethod
    def pull_request_repo(cls) -> IPullRequestRepo:
        # The GitHub client is shared between requests
        if cls.github_pull_request_repo is None:
            logger.debug("Creating GitHub client")

            github = get_github_client(GitHubSettings().token)
            cls.github_pull_request_repo = GitHubPullRequestRepo(github)

        return cls.github_pull_request_repo
