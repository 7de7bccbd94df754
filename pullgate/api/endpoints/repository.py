from dataclasses import dataclass

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from pullgate.api.endpoints.di import Di
from pullgate.api.middleware import fails_with
from pullgate.common.json import asjson

router = APIRouter()


@dataclass
class RepositoryInfo:
    repository_name: str
    owner: str


@router.post("/repositories", status_code=201)
@fails_with("Failed to add repository.")
async def add_repository(di: Di, info: RepositoryInfo) -> JSONResponse:
    repository = di.repository_repo().create_repository(
        name=info.repository_name, owner=info.owner
    )

    return JSONResponse(asjson(repository), status_code=201)


@router.delete("/repositories")
@fails_with("Failed to remove repository.")
async def remove_repository(di: Di, info: RepositoryInfo) -> dict[str, str]:
    # TODO: delete by id once repositories are unique per name/owner pair,
    # right now every duplicate is removed at once.
    di.repository_repo().delete_repositories(
        name=info.repository_name, owner=info.owner
    )

    return {"message": "Repository removed."}


@router.get("/repositories")
@fails_with("Failed to fetch repositories.")
async def list_repositories(di: Di) -> JSONResponse:
    return JSONResponse(asjson(di.repository_repo().list_repositories()))
