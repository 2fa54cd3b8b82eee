"""Custom Exception Hierarchy for the page/sort service
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. A FastAPI dependency turns a pagination ``ValidationFailure`` into a
       typed exception (the normaliser itself never raises)
    2. FastAPI exception handler catches it (see main.py)
    3. Handler converts to structured JSON response
    4. Client receives error envelope with code, message, and context
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class PageSortValidationError(ValidationError):
    """Raised when list-query parameters violate an endpoint's page/sort config."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        kind: str | None = None,
    ):
        super().__init__(message, field=field)
        self.value = value
        self.kind = kind


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class PageSortConfigError(ConfigurationError):
    """Raised when a page/sort config is internally inconsistent."""
