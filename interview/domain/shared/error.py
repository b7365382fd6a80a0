"""Error hierarchy for the interview service.

Error layers:
- InterviewError: Base class for all service errors
- DomainError: Missing records, rejected input (4xx responses)
- InfrastructureError: Record store or blob store failures (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class InterviewError(Exception):
    """Base class for all interview service errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(InterviewError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists."""


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(InterviewError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Record store is unavailable or rejected a statement."""


class BlobStoreError(InfrastructureError):
    """Blob store upload or delete failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
