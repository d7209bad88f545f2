"""Maps domain errors to HTTP error responses."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi.responses import JSONResponse

from store_locator.domain.errors import (
    DataAccessError,
    DomainError,
    GeospatialError,
    ResourceNotFound,
    UnexpectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_DATA_ACCESS_MESSAGE = "A database error occurred while processing your request"
GENERIC_UNEXPECTED_MESSAGE = "An unexpected error occurred while processing your request"


def _describe(error: DomainError) -> tuple[int, str, str]:
    """Return (status, error label, client-facing message)."""
    if isinstance(error, ResourceNotFound):
        return 404, "Not Found", error.message
    if isinstance(error, ValidationError):
        field_info = f" (field: {error.field})" if error.field else ""
        return 400, "Validation Error", f"{error.message}{field_info}"
    if isinstance(error, GeospatialError):
        return 400, "Geospatial Error", error.message
    if isinstance(error, DataAccessError):
        # Internal detail stays in the logs
        logger.error("Data access error: %s", error.message, exc_info=error.cause)
        return 500, "Data Access Error", GENERIC_DATA_ACCESS_MESSAGE
    if isinstance(error, UnexpectedError):
        logger.error("Unexpected error: %s", error.message, exc_info=error.cause)
        return 500, "Internal Server Error", GENERIC_UNEXPECTED_MESSAGE
    logger.error("Unclassified domain error: %r", error)
    return 500, "Internal Server Error", GENERIC_UNEXPECTED_MESSAGE


def error_response(error: DomainError, path: str) -> JSONResponse:
    logger.warning("Domain error on path %s: %s", path, error.message)
    status, label, message = _describe(error)
    return JSONResponse(
        status_code=status,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "status": status,
            "error": label,
            "message": message,
            "path": path,
        },
    )
