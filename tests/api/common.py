import sqlite3

from pullgate.api.infra.schema import setup_schema


class SqliteTestWrapper:
    connection: sqlite3.Connection | None = None

    @classmethod
    def _setup(cls) -> None:
        if cls.connection is None:
            cls.reset()

    @classmethod
    def reset(cls) -> None:
        """Refresh the datasources used for testing."""

        if cls.connection:
            cls.connection.execute("DELETE FROM repositories;")
            cls.connection.commit()

        else:
            # The test client runs the app in a different thread
            cls.connection = sqlite3.connect(
                ":memory:", check_same_thread=False
            )

            setup_schema(cls.connection)
