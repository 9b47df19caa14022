"""Structured error helpers for API responses."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.schemas.base import error_response
from taskboard.schemas.validation import field_errors

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.errors = errors
        self.payload = error_response(message, errors)


def raise_app_error(
    status_code: int,
    code: str,
    message: str,
    errors: Optional[Dict[str, List[str]]] = None,
) -> None:
    """Raise an AppError with a standardized error shape."""
    raise AppError(status_code, code, message, errors)


def not_found(code: str, message: str) -> None:
    """Raise the not-found error used for both missing and foreign-owned resources."""
    raise_app_error(status.HTTP_404_NOT_FOUND, code, message)


def unauthorized() -> None:
    raise_app_error(status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Unauthorized")


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=exc.payload, headers=headers)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures.
    
    A malformed path identifier cannot name an existing resource and is
    reported as not found; query and body problems are 400s with a
    field -> messages map.
    """
    errors = exc.errors()
    sources = {error["loc"][0] for error in errors if error.get("loc")}

    if "path" in sources:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_response("Resource not found"),
        )

    message = "Invalid query parameters" if sources == {"query"} else "Validation failed"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(message, field_errors(errors, skip=1)),
    )


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(UNEXPECTED_ERROR_MESSAGE),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
