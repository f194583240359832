"""Error kinds raised by the HTTP layer and the handlers rendering them.

Every failure is rendered with the same envelope, ``{"error": <message>}``.
Messages are fixed per kind so storage internals never reach the client.
"""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiErrorKind(Enum):
    """Client and server failures with their HTTP status and public message."""

    MALFORMED_BODY = (status.HTTP_400_BAD_REQUEST, "invalid request body")
    MISSING_IDENTIFIER = (status.HTTP_400_BAD_REQUEST, "id is required")
    INVALID_IDENTIFIER = (status.HTTP_400_BAD_REQUEST, "id must be an integer")
    MISSING_NAME = (status.HTTP_400_BAD_REQUEST, "name is required")
    MISSING_EMAIL = (status.HTTP_400_BAD_REQUEST, "email is required")
    NO_FIELDS_TO_UPDATE = (
        status.HTTP_400_BAD_REQUEST,
        "specify at least one field to update",
    )
    USER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "user not found")
    LIST_FAILED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to fetch users")
    CREATE_FAILED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to create user")
    FETCH_FAILED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to fetch user")
    UPDATE_FAILED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to update user")
    DELETE_FAILED = (status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to delete user")

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message


class ApiError(Exception):
    """Raised wherever a request must end with a mapped error response."""

    def __init__(self, kind: ApiErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_response(self) -> dict[str, str]:
        """Render the uniform error envelope."""
        return {"error": self.kind.message}


def error_response(
    status_code: int, message: str, *, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a JSON error response with the uniform envelope."""
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        level = logging.WARNING if exc.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "Request to %s failed: %s",
            request.url.path,
            exc.kind.name,
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Validation error on %s: %s", request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid request")

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s",
            request.url.path,
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error"
        )


__all__ = ["ApiError", "ApiErrorKind", "error_response", "register_error_handlers"]
