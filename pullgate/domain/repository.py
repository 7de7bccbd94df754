from dataclasses import dataclass

RepositoryId = int


@dataclass
class Repository:
    """
    A repository tracked by this service. `name` is the provider's repository
    name and `owner` is the user or organization that owns it. Nothing stops
    the same name/owner pair from being stored more than once.
    """

    id: RepositoryId
    name: str
    owner: str
