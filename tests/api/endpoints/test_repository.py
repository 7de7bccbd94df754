from unittest.mock import MagicMock

from pullgate.api.main import app
from pullgate.application.exceptions import StorageError
from tests.api.endpoints.common import TestDiContainer, TestEndpointWrapper


class TestRepositoryEndpoints(TestEndpointWrapper):
    @classmethod
    def setup_class(cls) -> None:
        cls.app = app

        super().setup_class()

    def add_repository(self, name: str, owner: str) -> dict[str, object]:
        response = self.client.post(
            "/repositories",
            json={"repository_name": name, "owner": owner},
        )

        assert response.status_code == 201

        return response.json()  # type: ignore[no-any-return]

    def remove_repository(self, name: str, owner: str) -> dict[str, object]:
        response = self.client.request(
            "DELETE",
            "/repositories",
            json={"repository_name": name, "owner": owner},
        )

        assert response.status_code == 200

        return response.json()  # type: ignore[no-any-return]

    def test_add_repository_returns_created_record(self) -> None:
        repository = self.add_repository("repo", "user")

        assert repository["id"]
        assert repository["name"] == "repo"
        assert repository["owner"] == "user"

    def test_added_repository_is_listed(self) -> None:
        repository = self.add_repository("repo", "user")

        response = self.client.get("/repositories")

        assert response.status_code == 200
        assert response.json() == [repository]

    def test_list_repositories_when_empty(self) -> None:
        response = self.client.get("/repositories")

        assert response.status_code == 200
        assert response.json() == []

    def test_duplicate_repositories_are_allowed(self) -> None:
        first = self.add_repository("repo", "user")
        second = self.add_repository("repo", "user")

        assert first["id"] != second["id"]

        assert len(self.client.get("/repositories").json()) == 2

    def test_remove_repository_deletes_all_matching_records(self) -> None:
        self.add_repository("repo", "user")
        self.add_repository("repo", "user")
        other_owner = self.add_repository("repo", "someone_else")
        other_name = self.add_repository("other_repo", "user")

        body = self.remove_repository("repo", "user")

        assert body == {"message": "Repository removed."}

        remaining = self.client.get("/repositories").json()

        assert remaining == [other_owner, other_name]

    def test_removing_nonexistent_repository_is_successful(self) -> None:
        body = self.remove_repository("does_not_exist", "user")

        assert body == {"message": "Repository removed."}

    def test_missing_body_fields_return_generic_error(self) -> None:
        responses = {
            "Failed to add repository.": self.client.post(
                "/repositories", json={"owner": "user"}
            ),
            "Failed to remove repository.": self.client.request(
                "DELETE", "/repositories", json={"repository_name": "repo"}
            ),
        }

        for msg, response in responses.items():
            assert response.status_code == 500
            assert response.json() == {"error": msg}

        assert self.client.get("/repositories").json() == []

    def test_missing_body_returns_generic_error(self) -> None:
        response = self.client.post("/repositories")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to add repository."}

    def test_storage_errors_are_hidden_from_caller(self) -> None:
        repository_repo = MagicMock()
        repository_repo.create_repository.side_effect = StorageError("disk is on fire")
        repository_repo.delete_repositories.side_effect = StorageError("disk is on fire")
        repository_repo.list_repositories.side_effect = StorageError("disk is on fire")

        TestDiContainer.repository_repo_override = repository_repo

        body = {"repository_name": "repo", "owner": "user"}

        responses = {
            "Failed to add repository.": self.client.post(
                "/repositories", json=body
            ),
            "Failed to remove repository.": self.client.request(
                "DELETE", "/repositories", json=body
            ),
            "Failed to fetch repositories.": self.client.get("/repositories"),
        }

        for msg, response in responses.items():
            assert response.status_code == 500
            assert response.json() == {"error": msg}
            assert "disk is on fire" not in response.text
