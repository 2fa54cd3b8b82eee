"""Structured failure value returned by the page/sort normaliser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from core.exceptions import PageSortValidationError


class FailureKind(str, Enum):
    """Which rule of the normalisation pipeline rejected the request."""

    PARAMETER_PARSE = "parameter_parse"
    RANGE_VIOLATION = "range_violation"
    SORT_FIELD_DISALLOWED = "sort_field_disallowed"
    SORT_FIELD_UNKNOWN = "sort_field_unknown"
    SORT_DIRECTION_INVALID = "sort_direction_invalid"


@dataclass(frozen=True)
class ValidationFailure:
    """The first rule violated while normalising raw list-query parameters.

    ``message`` wording is matched by callers and must not change.
    ``field`` uses the wire parameter name (``offset``, ``limit``,
    ``sortBy``, ``sortDir``) and ``value`` the offending input as text.
    """

    message: str
    kind: FailureKind
    field: Optional[str] = None
    value: Optional[str] = None

    def to_context(self) -> Dict[str, Any]:
        """Return the non-empty detail fields for an error envelope."""

        return {
            key: value
            for key, value in {
                "field": self.field,
                "value": self.value,
                "kind": self.kind.value,
            }.items()
            if value is not None
        }

    def to_exception(self) -> PageSortValidationError:
        """Return an exception carrying this failure for raise-style callers."""

        return PageSortValidationError(
            self.message,
            field=self.field,
            value=self.value,
            kind=self.kind.value,
        )


__all__ = ["FailureKind", "ValidationFailure"]
