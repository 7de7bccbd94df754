import logging
import sqlite3

from pullgate.api.infra.db_connection import get_default_db

logger = logging.getLogger("pullgate")


def setup_schema(db: sqlite3.Connection) -> None:
    # Safe to run on every startup, existing tables are left untouched
    db.executescript(
        """
        CREATE TABLE IF NOT EXISTS repositories (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            owner TEXT NOT NULL
        );
        """
    )
    db.commit()

    logger.debug("Database schema is up to date")


if __name__ == "__main__":
    setup_schema(get_default_db())
