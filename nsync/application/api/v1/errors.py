"""Centralized error transformation for API routes.

Maps nsync errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from nsync.domain.shared.error import (
    ConflictingSources,
    DomainError,
    InfrastructureError,
    NsyncError,
    UnknownLifecycle,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    ConflictingSources: 409,
    UnknownLifecycle: 400,
}


def map_nsync_error(error: NsyncError) -> HTTPException:
    """Map an nsync error to an HTTPException.

    Args:
        error: The nsync error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        if isinstance(error, ValidationError):
            if error.field is not None:
                detail["field"] = error.field
            status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 422)
        else:
            status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown NsyncError subclasses
    return HTTPException(status_code=500, detail=detail)
