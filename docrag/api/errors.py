"""
Exception handlers.

Translate classified core errors and request validation failures into
ErrorResponse bodies with the matching HTTP status.

Dependencies: fastapi, docrag.core.exceptions, docrag.models.common
System role: Error-to-HTTP mapping
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docrag.configs import get_settings
from docrag.core.exceptions import DocRAGError, ErrorKind
from docrag.models.common import ErrorResponse
from docrag.observability.log_utils import (
    log_classified_error,
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _correlation_id(request: Request) -> str | None:
    return getattr(request.state, "correlation_id", None)


async def docrag_error_handler(request: Request, exc: DocRAGError) -> JSONResponse:
    """Map a DocRAGError to its kind's status code."""
    log_classified_error(
        logger,
        "Request failed",
        exc,
        path=request.url.path,
        correlation_id=_correlation_id(request),
    )

    body = ErrorResponse(error=exc.message, kind=exc.kind.value, details=exc.details or None)
    response = _error_response(exc.status_code, body)
    if exc.retryable:
        response.headers["Retry-After"] = "5"
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as VALIDATION errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or None
    message = first.get("msg", "Invalid request")
    log_with_context(
        logger,
        logging.INFO,
        "Invalid request",
        path=request.url.path,
        field=field,
        error=message,
        correlation_id=_correlation_id(request),
    )
    body = ErrorResponse(
        error=f"{field}: {message}" if field else message,
        kind=ErrorKind.VALIDATION.value,
        details={"field": field} if field else None,
    )
    return _error_response(ErrorKind.VALIDATION.status_code, body)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map anything unclassified to INTERNAL without leaking internals."""
    log_exception_with_context(
        logger,
        "Unhandled error",
        exc,
        path=request.url.path,
        correlation_id=_correlation_id(request),
    )
    message = str(exc) if get_settings().debug else "Internal server error"
    body = ErrorResponse(error=message, kind=ErrorKind.INTERNAL.value)
    return _error_response(ErrorKind.INTERNAL.status_code, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocRAGError, docrag_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
