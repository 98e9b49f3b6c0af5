"""
Global error handling.

Info errors are answers (404), bad parameters are the caller's fault (400),
everything else is a generic 500 that never leaks endpoint details.
"""

from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from greffier.domain.exceptions import (
    FatalError,
    GreffierException,
    InfoError,
    InvalidParameterError,
)
from greffier.infrastructure.monitoring import get_logger
from greffier.presentation.schemas import ErrorResponse

logger = get_logger(__name__)


def _error_response(
    status_code: int, message: str, kind: Optional[str] = None
) -> JSONResponse:
    body = ErrorResponse(kind=kind, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def greffier_exception_handler(
    request: Request, exc: GreffierException
) -> JSONResponse:
    """
    Handle Greffier domain exceptions.

    Converts domain exceptions to HTTP responses.
    """
    if isinstance(exc, InfoError):
        return _error_response(
            status.HTTP_404_NOT_FOUND, exc.message, kind=exc.kind.value
        )

    if isinstance(exc, InvalidParameterError):
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    if isinstance(exc, FatalError):
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{type(exc).__name__} {exc.details}"
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, FatalError.default_message
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or mistyped parameters are a 400, not FastAPI's 422."""
    missing = [
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    ]
    message = "Bad Request"
    if missing:
        message = f"Missing or invalid parameter: {', '.join(missing)}"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log with traceback, answer with the generic message."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, FatalError.default_message
    )
