"""
Domain exceptions for the HTTP integration layer.

Parsing and matching never raise; these are raised by the request helpers
and settings checks, and converted to HTTP responses by the handlers in
main.py.
"""


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """Raised when locale configuration is invalid."""

    pass


class NotAcceptableException(DomainException):
    """Raised when no supported locale satisfies the request."""

    def __init__(self, message: str, accept_language: str | None = None):
        self.accept_language = accept_language
        super().__init__(message)
