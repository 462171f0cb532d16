"""
Mapping from domain errors to HTTP responses.

Services return error kinds inside ``Err``; routes unwrap them, and the
handlers registered here turn whatever was raised into a JSON body with
the matching status. Anything unrecognised becomes a 500 with no detail.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    StorefrontError,
    ValidationError,
)

from .models.errors import ErrorResponse, ValidationIssue

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins.
STATUS_BY_ERROR: list[tuple[type[StorefrontError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]

# Request parts FastAPI prefixes validation locations with.
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def status_for(error: StorefrontError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def internal_error_body() -> dict[str, Any]:
    return ErrorResponse(error="INTERNAL_ERROR", message="Internal server error").model_dump()


def validation_issues(errors: list[dict[str, Any]]) -> list[ValidationIssue]:
    """Flatten pydantic error entries into ``{path, message}`` issues."""
    issues = []
    for entry in errors:
        loc = list(entry.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        issues.append(
            ValidationIssue(path=".".join(str(part) for part in loc), message=entry["msg"])
        )
    return issues


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unmapped %s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status_code, content=internal_error_body())

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = validation_issues(exc.errors())
    body = ErrorResponse(
        error="VALIDATION_ERROR",
        message=issues[0].message if issues else "Invalid payload",
        details={"issues": [issue.model_dump() for issue in issues]},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=internal_error_body(),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
