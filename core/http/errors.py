"""Utilities for formatting structured HTTP error responses."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import status

from core.exceptions import (
    ConfigurationError,
    ServiceError,
    ValidationError,
)
from core.pydantic_schemas import error as api_error


def _context(**values: Any) -> Dict[str, Any] | None:
    context = {key: value for key, value in values.items() if value is not None}
    return context or None


def format_validation_error(exc: ValidationError) -> Dict[str, Any]:
    """Return a 400 envelope for :class:`ValidationError`.

    ``message`` is the failure text unchanged; clients match on it.
    """

    context = _context(
        field=getattr(exc, "field", None),
        value=getattr(exc, "value", None),
        kind=getattr(exc, "kind", None),
    )
    return api_error(status.HTTP_400_BAD_REQUEST, exc.message, data=context)


def format_configuration_error(exc: ConfigurationError) -> Dict[str, Any]:
    """Return a 500 envelope for :class:`ConfigurationError`."""

    return api_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
        data=_context(key=getattr(exc, "key", None)),
    )


def format_service_error(exc: ServiceError) -> Dict[str, Any]:
    """Return a 500 envelope for generic service errors."""

    return api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


__all__ = [
    "format_configuration_error",
    "format_service_error",
    "format_validation_error",
]
