class DomainError(Exception):
    """Base exception for attendance engine errors."""


class ValidationError(DomainError):
    """Raised on programmatic misuse (missing required argument, unknown option)."""
