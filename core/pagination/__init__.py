"""List-query (offset/limit/sort) normalisation for list endpoints."""

from .checker import MISSING_DEFAULT_SORT_NOTE, SORTING_DISABLED_NOTE, check_page_sort_config
from .constraints import PageSortConfig
from .dependencies import PageSortDependency, page_sort_dependency
from .models import PageSortRequest, SortDirection
from .normalizer import PageSortResult, RawPageSortParams, normalize_page_sort
from .results import FailureKind, ValidationFailure

__all__ = [
    "FailureKind",
    "MISSING_DEFAULT_SORT_NOTE",
    "PageSortConfig",
    "PageSortDependency",
    "PageSortRequest",
    "PageSortResult",
    "RawPageSortParams",
    "SORTING_DISABLED_NOTE",
    "SortDirection",
    "ValidationFailure",
    "check_page_sort_config",
    "normalize_page_sort",
    "page_sort_dependency",
]
