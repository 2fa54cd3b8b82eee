"""FastAPI wiring for page/sort parameters."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Request

from .checker import check_page_sort_config
from .constraints import PageSortConfig
from .models import PageSortRequest
from .normalizer import RawPageSortParams, normalize_page_sort
from .results import ValidationFailure

logger = logging.getLogger(__name__)

PageSortDependency = Callable[[Request], PageSortRequest]


def page_sort_dependency(
    config: Optional[PageSortConfig] = None,
    *,
    name: Optional[str] = None,
) -> PageSortDependency:
    """Return a FastAPI dependency resolving :class:`PageSortRequest` for one route.

    The config is checked here, once, when the route module is imported, so an
    inconsistent config stops the application from starting instead of
    failing on the first request.

    Usage::

        MONTHS_PAGE_SORT = PageSortConfig(default_limit=12, max_limit=12,
                                          valid_sort_fields=("name", "days"))

        @router.get("/months")
        async def list_months(
            page_sort: PageSortRequest = Depends(page_sort_dependency(MONTHS_PAGE_SORT)),
        ): ...

    Raises:
        PageSortConfigError: If ``config`` fails :func:`check_page_sort_config`.
    """

    resolved_config = config or PageSortConfig()
    check_page_sort_config(resolved_config, name=name)
    logger.debug("Registered page/sort dependency for %s: %s", name or "<unnamed>", resolved_config.describe())

    def _resolve_page_sort(request: Request) -> PageSortRequest:
        raw = RawPageSortParams.from_query(request.query_params)
        result = normalize_page_sort(raw, resolved_config)
        if isinstance(result, ValidationFailure):
            logger.error("Validation error on %s: %s", request.url.path, result.message)
            raise result.to_exception()
        return result

    return _resolve_page_sort


__all__ = ["PageSortDependency", "page_sort_dependency"]
