"""
Exceptions and error handlers for the API.

Every error response has the shape {"message": str}.
"""
import logging
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class APIError(HTTPException):
    """HTTP error whose message is safe to show to clients."""

    def __init__(self, status_code: int, message: str):
        self.message = message
        super().__init__(status_code=status_code, detail=message)


class UnauthorizedError(APIError):
    """Missing, invalid or expired session token."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message)


class NotFoundError(APIError):
    def __init__(self, resource: str):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found")


class ConflictError(APIError):
    def __init__(self, message: str):
        super().__init__(status.HTTP_409_CONFLICT, message)


class PersistenceError(Exception):
    """The entity store could not complete an operation."""

    def __init__(self, operation: str, cause: Optional[Exception] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Error entries carry the submitted input, which can include passwords
    errors = [{k: e.get(k) for k in ("loc", "msg", "type")} for e in exc.errors()]
    logger.info(f"Rejected request body on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request body"},
    )


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    """Log the storage failure for operators; the client only sees a generic 500."""
    logger.error(
        f"Storage failure during {request.method} {request.url.path}: {exc}",
        exc_info=exc.cause or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )
