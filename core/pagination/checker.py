"""One-time consistency check for :class:`PageSortConfig` values.

Run when a route is declared (``page_sort_dependency`` does this) or from a
unit test over every config an application declares. Never runs per
request.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from core.exceptions import PageSortConfigError

from .constraints import PageSortConfig

logger = logging.getLogger(__name__)

MISSING_DEFAULT_SORT_NOTE = (
    "You have configured validSortFields. It is good practice to set defaultSortBy as well."
)
SORTING_DISABLED_NOTE = (
    "defaultSortBy is set but validSortFields is empty; every request will be rejected "
    "with 'Sorting is not allowed for this resource'."
)


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def check_page_sort_config(
    config: PageSortConfig,
    *,
    name: Optional[str] = None,
) -> Tuple[str, ...]:
    """Validate ``config`` and return advisory notes.

    Args:
        config: The endpoint constraints to inspect.
        name: Optional label (usually the route path) included in log lines.

    Returns:
        Non-fatal advisory notes; empty when the config needs no attention.

    Raises:
        PageSortConfigError: If ``min_offset`` is negative, if ``min_limit``
            is below 1, or if ``default_sort_by`` is set but is not one of a non-empty
            ``valid_sort_fields``.
    """

    label = name or "page/sort config"
    if config.min_offset < 0:
        logger.error("%s: min_offset %s is negative", label, config.min_offset)
        raise PageSortConfigError(
            f"minOffset must not be negative, got {config.min_offset}", key="min_offset"
        )
    if config.min_limit < 1:
        logger.error("%s: min_limit %s is below 1", label, config.min_limit)
        raise PageSortConfigError(f"minLimit must be at least 1, got {config.min_limit}", key="min_limit")

    default_sort_by = config.default_sort_by
    valid_sort_fields = config.valid_sort_fields

    if _has_text(default_sort_by) and valid_sort_fields and default_sort_by not in valid_sort_fields:
        logger.error(
            "%s: defaultSortBy %r is not one of %s", label, default_sort_by, list(valid_sort_fields)
        )
        raise PageSortConfigError(
            f"defaultSortBy must be one of the validSortFields: [{', '.join(valid_sort_fields)}]",
            key="default_sort_by",
        )

    notes: list[str] = []
    if valid_sort_fields and not _has_text(default_sort_by):
        notes.append(MISSING_DEFAULT_SORT_NOTE)
    if _has_text(default_sort_by) and not valid_sort_fields:
        notes.append(SORTING_DISABLED_NOTE)

    for note in notes:
        logger.info("%s: %s", label, note)

    return tuple(notes)


__all__ = ["check_page_sort_config", "MISSING_DEFAULT_SORT_NOTE", "SORTING_DISABLED_NOTE"]
