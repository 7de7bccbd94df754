import logging
import sqlite3

from pullgate.api.infra.db_connection import DbConnection
from pullgate.application.exceptions import StorageError
from pullgate.domain.repo.repository_repo import IRepositoryRepo
from pullgate.domain.repository import Repository

logger = logging.getLogger("pullgate")


class RepositoryRepo(IRepositoryRepo, DbConnection):
    def create_repository(self, *, name: str, owner: str) -> Repository:
        try:
            repo_id = self.conn.execute(
                """
                INSERT INTO repositories (name, owner)
                VALUES (?, ?)
                RETURNING id;
                """,
                [name, owner],
            ).fetchone()[0]

            self.conn.commit()

        except sqlite3.Error as ex:
            raise StorageError(f"Could not create repository {owner}/{name}") from ex

        logger.info(f"Added repository {owner}/{name} (id {repo_id})")

        return Repository(repo_id, name=name, owner=owner)

    def delete_repositories(self, *, name: str, owner: str) -> int:
        try:
            cursor = self.conn.execute(
                "DELETE FROM repositories WHERE name=? AND owner=?;",
                [name, owner],
            )

            self.conn.commit()

        except sqlite3.Error as ex:
            raise StorageError(f"Could not delete repository {owner}/{name}") from ex

        logger.info(f"Removed {cursor.rowcount} row(s) for repository {owner}/{name}")

        return cursor.rowcount

    def list_repositories(self) -> list[Repository]:
        try:
            rows = self.conn.execute(
                "SELECT id, name, owner FROM repositories ORDER BY id;"
            ).fetchall()

        except sqlite3.Error as ex:
            raise StorageError("Could not list repositories") from ex

        return [self._convert(row) for row in rows]

    @staticmethod
    def _convert(row: sqlite3.Row) -> Repository:
        return Repository(
            id=row["id"],
            name=row["name"],
            owner=row["owner"],
        )
