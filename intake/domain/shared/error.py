"""Error hierarchy for the intake service.

Error layers:
- IntakeError: Base class for all intake errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like misconfiguration (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intake.domain.requesttype.model.value import RequestTypeId


class IntakeError(Exception):
    """Base class for all intake errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(IntakeError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists or is still referenced."""


class CycleDetectedError(DomainError):
    """The extension chain of a request type revisits a request type."""

    def __init__(self, request_type_id: "RequestTypeId", request_type_name: str) -> None:
        super().__init__(
            f"Request type {request_type_name} (id: {request_type_id}) has been referenced "
            f"more than once in this extension, possible loop detected",
            code="cycle_detected",
        )
        self.request_type_id = request_type_id
        self.request_type_name = request_type_name


class ExtensionDepthExceededError(DomainError):
    """The extension chain of a request type is longer than allowed."""

    def __init__(self, request_type_id: "RequestTypeId", max_depth: int) -> None:
        super().__init__(
            f"Extension chain of request type {request_type_id} exceeds "
            f"the maximum depth of {max_depth}",
            code="extension_too_deep",
        )
        self.request_type_id = request_type_id
        self.max_depth = max_depth


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(IntakeError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
