"""Package-wide page/sort defaults.

Endpoints override these per route through ``PageSortConfig``; the values
here only seed the dataclass field defaults.
"""

from __future__ import annotations

from core.utils.env import get_int_env

MIN_OFFSET = get_int_env("PAGESORT_MIN_OFFSET", 0)
DEFAULT_OFFSET = get_int_env("PAGESORT_DEFAULT_OFFSET", 0)
MIN_LIMIT = get_int_env("PAGESORT_MIN_LIMIT", 1)
MAX_LIMIT = get_int_env("PAGESORT_MAX_LIMIT", 100)
DEFAULT_LIMIT = get_int_env("PAGESORT_DEFAULT_LIMIT", 25)

# Query parameter names read from inbound requests
OFFSET_PARAM = "offset"
LIMIT_PARAM = "limit"
SORT_BY_PARAM = "sortBy"
SORT_DIR_PARAM = "sortDir"

__all__ = [
    "MIN_OFFSET",
    "DEFAULT_OFFSET",
    "MIN_LIMIT",
    "MAX_LIMIT",
    "DEFAULT_LIMIT",
    "OFFSET_PARAM",
    "LIMIT_PARAM",
    "SORT_BY_PARAM",
    "SORT_DIR_PARAM",
]
