from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from pullgate.api.endpoints.config import router as config_router
from pullgate.api.endpoints.pull_request import router as pull_request_router
from pullgate.api.endpoints.repository import router as repository_router
from pullgate.api.middleware import (
    SlowRequestMiddleware,
    pullgate_exception_handler,
    validation_exception_handler,
)
from pullgate.application.exceptions import PullGateException

app = FastAPI(
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
app.include_router(repository_router)
app.include_router(pull_request_router)
app.include_router(config_router)
app.add_middleware(SlowRequestMiddleware)
app.add_exception_handler(PullGateException, pullgate_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
