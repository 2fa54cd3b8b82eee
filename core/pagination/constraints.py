"""Per-endpoint page/sort constraints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from config import pagination as defaults


@dataclass(frozen=True)
class PageSortConfig:
    """Acceptable range and sort vocabulary for one list endpoint.

    Built once when a route is declared and shared by every request to it.
    An empty ``valid_sort_fields`` disables sorting entirely. The order of
    ``valid_sort_fields`` is kept and used when listing valid options in
    error messages.
    """

    min_offset: int = defaults.MIN_OFFSET
    default_offset: int = defaults.DEFAULT_OFFSET
    min_limit: int = defaults.MIN_LIMIT
    max_limit: int = defaults.MAX_LIMIT
    default_limit: int = defaults.DEFAULT_LIMIT
    valid_sort_fields: Tuple[str, ...] = field(default_factory=tuple)
    default_sort_by: Optional[str] = None

    def __post_init__(self) -> None:
        fields: Iterable[str] = self.valid_sort_fields or ()
        if isinstance(fields, str):
            fields = (fields,)
        # de-duplicate while keeping declaration order
        object.__setattr__(self, "valid_sort_fields", tuple(dict.fromkeys(fields)))

    @property
    def sorting_allowed(self) -> bool:
        return bool(self.valid_sort_fields)

    def describe(self) -> str:
        """Return a one-line summary used in debug logs."""

        return (
            f"min_offset={self.min_offset}, default_offset={self.default_offset}, "
            f"min_limit={self.min_limit}, max_limit={self.max_limit}, "
            f"default_limit={self.default_limit}, default_sort_by={self.default_sort_by}, "
            f"valid_sort_fields={list(self.valid_sort_fields)}"
        )


__all__ = ["PageSortConfig"]
