from typing import Optional

from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import logging

logger = logging.getLogger(__name__)


class BingeBaseException(Exception):
    """Base exception for the application"""
    status_code = 500


class BadRequestError(BingeBaseException):
    """Missing or malformed required input"""
    status_code = 400


class UpstreamError(BingeBaseException):
    """A single call to an upstream catalog provider failed"""
    status_code = 502

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider} API error: {message}")
        self.provider = provider


class TransportError(UpstreamError):
    """Network-level failure, including timeouts"""


class UpstreamStatusError(UpstreamError):
    """Provider answered with a non-success status"""

    def __init__(self, provider: str, status_code: int, detail: Optional[str] = None):
        super().__init__(provider, detail or str(status_code))
        self.upstream_status = status_code
        if status_code == 404:
            self.status_code = 404


class DecodeError(UpstreamError):
    """Provider body could not be decoded into the expected shape"""


class StoreError(BingeBaseException):
    """Constraint or I/O failure from the relational store"""


def _error_body(message, request_id, **extra):
    body = {"success": False, "error": message, "request_id": request_id}
    body.update(extra)
    return body


async def bingebase_exception_handler(request: Request, exc: BingeBaseException):
    """
    Map the application taxonomy to status codes and the error envelope.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    if exc.status_code >= 500:
        logger.error(
            f"{type(exc).__name__}: {exc}",
            extra={"request_id": request_id, "path": request.url.path},
            exc_info=exc.__cause__,
        )
    else:
        logger.info(f"{type(exc).__name__}: {exc}", extra={"request_id": request_id, "path": request.url.path})

    return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc), request_id))


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler. Returns 500 JSON response and hides internal error details.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content=_error_body("An unexpected error occurred", request_id),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle standard FastAPI HTTPExceptions (404 on unknown routes, 405, ...).
    """
    request_id = getattr(request.state, "request_id", "unknown")

    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, request_id),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors as bad requests.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info("Validation error", extra={"request_id": request_id, "errors": exc.errors()})

    return JSONResponse(
        status_code=400,
        content=_error_body(
            "Invalid request",
            request_id,
            details=jsonable_encoder(exc.errors()),
        ),
    )
