class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record does not exist or is not owned by the caller."""


class StoreError(DomainError):
    """Raised when the underlying persistence layer fails."""
