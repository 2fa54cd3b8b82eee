"""Validated page/sort descriptor handed to list endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.pagination import DEFAULT_LIMIT, DEFAULT_OFFSET


class SortDirection(str, Enum):
    """Supported sort directions for list queries."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "SortDirection":
        """Return ``DESC`` only for a case-insensitive ``desc``; everything else is ``ASC``."""

        if isinstance(raw, cls):
            return raw
        if raw is not None and raw.lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


class PageSortRequest(BaseModel):
    """Offset/limit window plus optional sort instruction for one request.

    Instances are only produced by :func:`core.pagination.normalize_page_sort`
    after every rule passed, so downstream code can trust the bounds without
    re-checking them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    offset: int = Field(
        default=DEFAULT_OFFSET,
        ge=0,
        description="Number of records to skip before collecting results",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        description="Maximum number of records to return",
    )
    sort_by: Optional[str] = Field(
        default=None,
        alias="sortBy",
        description="Field to sort by; absent or empty means unsorted",
    )
    sort_dir: SortDirection = Field(
        default=SortDirection.ASC,
        alias="sortDir",
        description="Sort direction, always lower-case",
    )

    @field_validator("offset", mode="before")
    @classmethod
    def _reset_negative_offset(cls, value: Any) -> Any:
        if isinstance(value, int) and value < 0:
            return DEFAULT_OFFSET
        return value

    @field_validator("limit", mode="before")
    @classmethod
    def _reset_non_positive_limit(cls, value: Any) -> Any:
        if isinstance(value, int) and value <= 0:
            return DEFAULT_LIMIT
        return value

    @field_validator("sort_dir", mode="before")
    @classmethod
    def _normalise_sort_dir(cls, value: Any) -> SortDirection:
        if value is None or isinstance(value, (str, SortDirection)):
            return SortDirection.from_raw(value)
        return value

    @property
    def is_ascending(self) -> bool:
        """Return ``True`` when the requested sort order is ascending."""

        return self.sort_dir == SortDirection.ASC

    @property
    def sql_sort_direction(self) -> str:
        """Return ``ASC`` or ``DESC`` for direct use in an ORDER BY clause."""

        return "ASC" if self.is_ascending else "DESC"

    @property
    def is_sorted(self) -> bool:
        return bool(self.sort_by and self.sort_by.strip())


__all__ = ["PageSortRequest", "SortDirection"]
