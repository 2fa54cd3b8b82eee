"""FastAPI routes for the months feature."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from core.pagination import PageSortRequest
from core.pydantic_schemas import ok as api_ok, page_meta
from features.months.dependencies import get_month_names_service, get_months_page_sort
from features.months.service import MonthNamesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/months", tags=["months"])


@router.get("")
async def list_months(
    page_sort: PageSortRequest = Depends(get_months_page_sort),
    service: MonthNamesService = Depends(get_month_names_service),
) -> dict:
    """Return month names a page at a time, optionally sorted by ``name`` or ``days``."""

    logger.info(
        "Received request for month names with offset=%s, limit=%s, sortBy=%s, sortDir=%s",
        page_sort.offset,
        page_sort.limit,
        page_sort.sort_by,
        page_sort.sort_dir.value,
    )
    result = service.list_months(page_sort)
    logger.debug("Returning %s month entries for offset %s", len(result.items), page_sort.offset)

    return api_ok(
        "Months retrieved",
        data=[item.model_dump() for item in result.items],
        meta=page_meta(page_sort, total=result.total),
    )


__all__ = ["router"]
