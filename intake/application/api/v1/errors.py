"""Centralized error transformation for API routes.

Maps intake errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from intake.domain.shared.error import (
    ConflictError,
    CycleDetectedError,
    DomainError,
    ExtensionDepthExceededError,
    InfrastructureError,
    IntakeError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    ConflictError: 409,
    CycleDetectedError: 409,
    ExtensionDepthExceededError: 409,
}


def map_intake_error(error: IntakeError) -> HTTPException:
    """Map an intake error to an HTTPException.

    Args:
        error: The intake error to map.

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
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        if isinstance(error, CycleDetectedError):
            detail["request_type_id"] = str(error.request_type_id)
            detail["request_type_name"] = error.request_type_name
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown IntakeError subclasses
    return HTTPException(status_code=500, detail=detail)
