from unittest.mock import AsyncMock

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from pullgate.api.di import DiContainer
from pullgate.api.infra.repository_repo import RepositoryRepo
from pullgate.api.middleware import (
    pullgate_exception_handler,
    validation_exception_handler,
)
from pullgate.application.exceptions import PullGateException
from pullgate.domain.repo.pull_request_repo import IPullRequestRepo
from pullgate.domain.repo.repository_repo import IRepositoryRepo
from tests.api.common import SqliteTestWrapper


class TestDiContainer(SqliteTestWrapper, DiContainer):
    # Set to a mock to simulate failures in the record store
    repository_repo_override: IRepositoryRepo | None = None

    github_pull_request_repo: IPullRequestRepo | None = None

    @classmethod
    def reset(cls) -> None:
        super().reset()

        cls.repository_repo_override = None
        cls.github_pull_request_repo = AsyncMock(spec=IPullRequestRepo)

    @classmethod
    def repository_repo(cls) -> IRepositoryRepo:
        if cls.repository_repo_override:
            return cls.repository_repo_override

        cls._setup()

        return RepositoryRepo(cls.connection)

    @classmethod
    def pull_request_repo(cls) -> IPullRequestRepo:
        assert cls.github_pull_request_repo

        return cls.github_pull_request_repo


class TestEndpointWrapper:
    app: FastAPI
    client: TestClient
    di: TestDiContainer

    @classmethod
    def setup_class(cls) -> None:
        if not hasattr(cls, "app"):
            cls.app = FastAPI()

        cls.di = TestDiContainer()
        cls.di.reset()
        cls.app.dependency_overrides[DiContainer] = lambda: cls.di

        cls.app.add_exception_handler(PullGateException, pullgate_exception_handler)
        cls.app.add_exception_handler(
            RequestValidationError, validation_exception_handler
        )
        cls.client = TestClient(cls.app)

    def setup_method(self) -> None:
        self.di.reset()
