# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Problem details responses and application-wide exception handlers."""

from http import HTTPStatus

from beartype import beartype
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import CalculationError, UnexpectedFailure
from ..core.logging_utils import get_logger
from ..schemas.problem import PROBLEM_JSON, ProblemDetails
from .middleware.correlation import CORRELATION_HEADER

logger = get_logger(__name__)

VALIDATION_ERROR_CODE = "VAL-001"
UNEXPECTED_ERROR_CODE = "GEN-500"
UNEXPECTED_ERROR_TITLE = "An unexpected error occurred."


@beartype
def problem_response(
    request: Request,
    status_code: int,
    title: str,
    *,
    detail: str | None = None,
    error_code: str | None = None,
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    """Build an ``application/problem+json`` response for ``request``."""
    correlation_id = getattr(request.state, "correlation_id", None)
    problem = ProblemDetails(
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        trace_id=getattr(request.state, "trace_id", None),
        correlation_id=correlation_id,
        error_code=error_code,
        errors=errors,
    )
    headers = {CORRELATION_HEADER: correlation_id} if correlation_id else None
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(mode="json", by_alias=True, exclude_none=True),
        media_type=PROBLEM_JSON,
        headers=headers,
    )


@beartype
def calculation_problem(request: Request, error: CalculationError) -> JSONResponse:
    """Map a calculation error to its problem details response."""
    if isinstance(error, UnexpectedFailure):
        return problem_response(
            request,
            error.status_code,
            UNEXPECTED_ERROR_TITLE,
            error_code=error.error_code,
        )

    logger.warning(
        "Calculation failed: error_code=%s error=%s",
        error.error_code,
        error.message,
    )
    return problem_response(
        request,
        error.status_code,
        "Calculation error",
        detail=error.message,
        error_code=error.error_code,
    )


def _group_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        key = ".".join(location) or "body"
        grouped.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return grouped


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer 400 with validation messages grouped by field."""
    errors = _group_validation_errors(exc)
    logger.warning(
        "Validation failed for %s: errors=%s payload=%r",
        request.url.path,
        errors,
        exc.body,
    )
    return problem_response(
        request,
        400,
        "Validation failed for the request.",
        error_code=VALIDATION_ERROR_CODE,
        errors=errors,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing and HTTP errors as problem details."""
    if exc.status_code == 404:
        logger.warning("404 Not Found: path=%s", request.url.path)
        return problem_response(
            request,
            404,
            "Resource Not Found",
            detail=f"No endpoint found for path {request.url.path}",
        )

    title = HTTPStatus(exc.status_code).phrase
    detail = exc.detail if isinstance(exc.detail, str) and exc.detail != title else None
    response = problem_response(request, exc.status_code, title, detail=detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log any escaped exception and answer a generic 500."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
        extra={"correlation_id": getattr(request.state, "correlation_id", "-")},
    )
    return problem_response(
        request,
        500,
        UNEXPECTED_ERROR_TITLE,
        error_code=UNEXPECTED_ERROR_CODE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the problem details handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
