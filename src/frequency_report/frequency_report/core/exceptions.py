from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DatasetLoadError(ValidationError):
    """Raised when an uploaded file cannot be parsed as a tabular extract."""

    def __init__(self, message: str, *, line: int | None = None):
        super().__init__(message)
        self.line = line


class DatasetNotLoadedError(DomainError):
    """Raised when a lookup or report is requested before any file was loaded."""
