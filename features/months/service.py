"""Service layer for the months feature."""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Callable

from core.pagination import PageSortRequest
from features.months.schemas import MonthInfo, MonthListResponse

logger = logging.getLogger(__name__)

_SORT_KEYS: dict[str, Callable[[MonthInfo], object]] = {
    "name": lambda month: month.name,
    "days": lambda month: month.days,
}


def build_months(year: int) -> list[MonthInfo]:
    """Return the twelve months of ``year`` in calendar order."""

    return [
        MonthInfo(name=calendar.month_name[number], days=calendar.monthrange(year, number)[1])
        for number in range(1, 13)
    ]


class MonthNamesService:
    """Serves month names one page at a time."""

    def __init__(self, year: int | None = None) -> None:
        self._year = year or date.today().year
        self._months = build_months(self._year)
        logger.debug("Initialised month info for %s: %s", self._year, [str(m) for m in self._months])

    @property
    def year(self) -> int:
        return self._year

    def list_months(self, page_sort: PageSortRequest) -> MonthListResponse:
        """Return the requested slice, sorted when ``page_sort`` asks for it.

        Ties keep calendar order in both directions. An offset past the end
        yields an empty page rather than an error.
        """

        months = list(self._months)

        sort_key = _SORT_KEYS.get((page_sort.sort_by or "").lower())
        if sort_key is not None:
            logger.debug("Sorting by %s, ascending: %s", page_sort.sort_by, page_sort.is_ascending)
            months.sort(key=sort_key, reverse=not page_sort.is_ascending)

        start = page_sort.offset
        if start >= len(months):
            logger.warning("Requested offset %s exceeds available data, returning empty page", start)
            return MonthListResponse(items=[], total=len(months))

        end = min(start + page_sort.limit, len(months))
        logger.debug("Fetching items from index %s to %s", start, end)
        return MonthListResponse(items=months[start:end], total=len(months))


__all__ = ["MonthNamesService", "build_months"]
