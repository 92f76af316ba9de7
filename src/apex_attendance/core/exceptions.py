class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced site or worker does not exist."""


class DuplicateAttendanceError(DomainError):
    """Raised by the attendance store when (worker, work date) already exists."""
