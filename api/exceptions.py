"""
Error handlers mapping catalog failures to JSON responses.

Body shape: {"error": <code>, "message": <text>, "details": {...}}
with "details" omitted when there are none.
"""

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.logging_config import logger
from movie_catalog.errors import (
    CatalogError,
    InfrastructureFailure,
    NotFoundError,
    ValidationFailure,
)

STATUS_BY_ERROR = {
    NotFoundError: 404,
    ValidationFailure: 400,
    InfrastructureFailure: 500,
}


def error_body(error: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict:
    content = {"error": error, "message": message}
    if details:
        content["details"] = details
    return content


def status_for(exc: CatalogError) -> int:
    """HTTP status for a catalog error (500 for unknown kinds)."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Handle CatalogError exceptions and return structured JSON response."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc.__cause__,
        )
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(error_body(exc.error, exc.message, exc.details)),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path, query or body parameters are a 400, like core validation."""
    logger.warning(f"{request.method} {request.url.path}: invalid request parameters")
    return JSONResponse(
        status_code=400,
        content=error_body(
            "validation_error",
            "Invalid request parameters",
            {"errors": jsonable_encoder(exc.errors())},
        ),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_body("internal_error", "An unexpected error occurred"),
    )
