"""FastAPI dependencies for the months feature."""

from __future__ import annotations

import logging

from core.pagination import PageSortConfig, page_sort_dependency
from features.months.service import MonthNamesService

logger = logging.getLogger(__name__)

MONTHS_PAGE_SORT = PageSortConfig(
    default_limit=12,
    max_limit=12,
    valid_sort_fields=("name", "days"),
)

get_months_page_sort = page_sort_dependency(MONTHS_PAGE_SORT, name="/api/v1/months")

_service_instance: MonthNamesService | None = None


def get_month_names_service() -> MonthNamesService:
    """Return the singleton month service shared across requests."""

    global _service_instance

    if _service_instance is None:
        logger.debug("Creating MonthNamesService singleton for dependency injection")
        _service_instance = MonthNamesService()

    return _service_instance


__all__ = ["MONTHS_PAGE_SORT", "get_month_names_service", "get_months_page_sort"]
