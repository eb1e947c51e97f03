"""
Single boundary that turns tagged errors into HTTP responses.

Services raise ``TaskTrackError`` subclasses without any notion of
status codes; this module alone decides the status and envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tasktrack.core.config import Settings
from tasktrack.core.exceptions import (
    AuthenticationError,
    ConfigError,
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    TaskTrackError,
    ValidationError,
)
from tasktrack.schemas.common import error_response

log = logging.getLogger(__name__)

# most specific first
STATUS_BY_ERROR: list[tuple[type[TaskTrackError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ConfigError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: TaskTrackError) -> int:
    for cls, code in STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    expose = not settings.is_production

    @app.exception_handler(TaskTrackError)
    async def _tasktrack_error(request: Request, exc: TaskTrackError):
        code = status_for(exc)
        headers = None
        if code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        if code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.code)
        else:
            log.info("%s %s -> %s (%s)", request.method, request.url.path, code, exc.code)
        return JSONResponse(
            status_code=code,
            content=error_response(exc.message, exc.code if expose else None),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response("Invalid request body", str(exc.errors()) if expose else None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def _db_error(request: Request, exc: SQLAlchemyError):
        log.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response("Database error occurred", str(exc) if expose else None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response("Internal Server Error", str(exc) if expose else None),
        )
