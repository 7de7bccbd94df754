from abc import ABC, abstractmethod

from pullgate.domain.repository import Repository


class IRepositoryRepo(ABC):
    @abstractmethod
    def create_repository(self, *, name: str, owner: str) -> Repository:
        ...

    @abstractmethod
    def delete_repositories(self, *, name: str, owner: str) -> int:
        """
        Delete every repository matching both `name` and `owner`, returning
        the number of deleted rows. Deleting nothing is not an error.
        """

    @abstractmethod
    def list_repositories(self) -> list[Repository]:
        ...
