from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from pullgate.api.endpoints.di import Di
from pullgate.api.middleware import fails_with
from pullgate.application.pull_request.merge_pull_request import (
    MergePullRequest,
)

router = APIRouter()


@router.get("/repositories/{repository_name}/pull-requests")
@fails_with("Failed to fetch pull requests.")
async def list_pull_requests(
    di: Di,
    repository_name: str,
    owner: Annotated[str, Query()],
) -> JSONResponse:
    pull_requests = await di.pull_request_repo().list_pull_requests(
        owner, repository_name
    )

    return JSONResponse(pull_requests)


@router.post(
    "/repositories/{repository_name}/pull-requests/{pull_request_id}/merge"
)
@fails_with("Failed to merge pull request.")
async def merge_pull_request(
    di: Di,
    repository_name: str,
    pull_request_id: int,
    owner: Annotated[str, Query()],
) -> JSONResponse:
    cmd = MergePullRequest(di.pull_request_repo())

    result = await cmd.handle(owner, repository_name, pull_request_id)

    return JSONResponse(result)
