class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UploadError(DomainError):
    """Raised when an attendance spreadsheet cannot be parsed."""


class ReportError(DomainError):
    """Raised when a report cannot be generated."""
