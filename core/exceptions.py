# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input data is invalid (empty names, negative hours or rates)."""


class NotFoundError(DomainError):
    """Raised when a quote, resource or catalog row does not exist."""


class BusinessRuleError(DomainError):
    """Raised when an operation conflicts with quote planning rules."""
