import os

from dotenv import load_dotenv

load_dotenv()


class DBSettings:
    db_url: str

    def __init__(self) -> None:
        self.db_url = os.getenv("DB_URL", "")

        if not self.db_url:
            raise ValueError("DB_URL must be defined")


class GitHubSettings:
    token: str

    def __init__(self) -> None:
        self.token = os.getenv("GITHUB_TOKEN", "")

        if not self.token:
            raise ValueError("GITHUB_TOKEN must be defined")


class ServerSettings:
    host: str
    port: int

    def __init__(self) -> None:
        self.host = os.getenv("PULLGATE_HOST", "0.0.0.0")  # noqa: S104

        if not self.host:
            raise ValueError("PULLGATE_HOST must be defined")

        try:
            self.port = int(os.getenv("PORT", "3000"))

        except ValueError as ex:
            raise ValueError("PORT must be an integer") from ex

        if not self.port:
            raise ValueError("PORT must be defined")


def verify_env_vars() -> None:
    """
    Eagerly load env vars to see if they are valid. The env vars are only valid
    at the time this function is called: if the env vars change, they may be
    reloaded and potentially invalid.
    """

    DBSettings()
    GitHubSettings()
    ServerSettings()
