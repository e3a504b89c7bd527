"""Turn exceptions into JSON error responses.

Every error leaves the API with the same body::

    {"message": "User not found", "code": "USER_NOT_FOUND"}

Register the handlers with ``setup_exception_handlers(app)``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notedesk.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Unknown users and an empty user list are 400 on /users, not 404.
ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_HAS_NOTES: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_USERS_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_USERNAME: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_STATUS_BY_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def _get_status_for_exception(exc: DomainException) -> int:
    """Status for ``exc``: by code first, then by exception type, else 400."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for exc_type, status_code in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "code": code.value},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainException)
    async def handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
        logger.warning(
            "%s %s failed: %s [%s] %s",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error(_get_status_for_exception(exc), exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Bodies that are not JSON objects never reach the services."""
        logger.warning(
            "%s %s rejected: %s", request.method, request.url.path, exc.errors()
        )
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "Malformed request body",
            ErrorCode.VALIDATION_ERROR,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _error(exc.status_code, "404 Not Found", ErrorCode.NOT_FOUND)
        return _error(exc.status_code, str(exc.detail), ErrorCode.HTTP_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        """Store and hashing failures end up here."""
        logger.exception("%s %s crashed", request.method, request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
