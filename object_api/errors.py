"""Store exceptions and application-level error handlers.

The repository raises the exceptions defined here; route handlers translate
them into `HTTPException`s with the right status code. Request decoding
failures never reach a handler: FastAPI raises `RequestValidationError`, which
`register_error_handlers` remaps from FastAPI's default 422 to 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A statement against the store failed (connectivity, constraint, driver)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ObjectNotFound(StoreError):
    """No row matches the requested identifier."""

    def __init__(self, object_id: int):
        super().__init__(f"Object {object_id} not found")
        self.object_id = object_id


class StoreUnavailable(StoreError):
    """The store could not be opened or did not answer the liveness check."""


def register_error_handlers(app: FastAPI) -> None:
    """Register the request-decoding error handler on the app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _validation_message(exc)},
        )


def _validation_message(exc: RequestValidationError) -> str:
    # query errors can only come from the `id` parameter
    for err in exc.errors():
        if err.get("loc") and err["loc"][0] == "query":
            return "Invalid ID"
    return "Invalid request payload"
