import logging
import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from pullgate.application.exceptions import (
    InvalidRequest,
    PullGateException,
    RequestFailed,
)

logger = logging.getLogger("pullgate")


class SlowRequestMiddleware:  # pragma: no cover
    """Warns whenever a slow request is made."""

    SLOW_REQUEST_THRESHOLD_SECONDS = 1.5

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        if scope["type"] == "http":
            start = time.time()
            await self.app(scope, receive, send)
            elapsed = time.time() - start

            if elapsed > self.SLOW_REQUEST_THRESHOLD_SECONDS:
                path = scope.get("path", "<unknown>")

                logger.warning(
                    "Request for `%s` was slow (%f seconds)", path, elapsed
                )

        else:
            await self.app(scope, receive, send)


async def pullgate_exception_handler(
    _: Request, exc: PullGateException
) -> JSONResponse:
    code = 400 if isinstance(exc, InvalidRequest) else 500

    return JSONResponse({"error": str(exc)}, status_code=code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Missing or malformed input is treated like any other failure of the
    endpoint it was meant for. Endpoints without `fails_with` keep the
    default FastAPI behavior.
    """

    endpoint = request.scope.get("endpoint")
    message = getattr(endpoint, "failure_message", None)

    if message is None:
        return await request_validation_exception_handler(request, exc)

    logger.warning(f"Invalid input for `{request.url.path}`: {exc.errors()}")

    return JSONResponse({"error": message}, status_code=500)


T = TypeVar("T")
Endpoint = Callable[..., Awaitable[T]]


def fails_with(message: str) -> Callable[[Endpoint[T]], Endpoint[T]]:
    """
    Turn any unexpected error raised by an endpoint into a `RequestFailed`
    error with the given message. Only `InvalidRequest` errors are passed
    through untouched, everything else is logged and hidden from the caller.
    """

    def outer(endpoint: Endpoint[T]) -> Endpoint[T]:
        @wraps(endpoint)
        async def inner(*args: Any, **kwargs: Any) -> T:  # type: ignore[misc]
            try:
                return await endpoint(*args, **kwargs)

            except InvalidRequest:
                raise

            except Exception as ex:
                logger.exception(f"Endpoint `{endpoint.__name__}` failed")

                raise RequestFailed(message) from ex

        # Read by `validation_exception_handler`
        inner.failure_message = message  # type: ignore[attr-defined]

        return inner

    return outer
