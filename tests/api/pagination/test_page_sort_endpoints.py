"""End-to-end behaviour of page/sort parameters on FastAPI routes."""

from __future__ import annotations

from typing import Any, Dict

import pytest
from fastapi import APIRouter, Depends, Request
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from core.pagination import (
    PageSortConfig,
    PageSortRequest,
    ValidationFailure,
    normalize_page_sort,
    page_sort_dependency,
)
from main import create_app

ITEMS = PageSortConfig(default_limit=12, max_limit=12, valid_sort_fields=("name", "days"))
DEFAULT_SORT = PageSortConfig(
    default_limit=12,
    max_limit=12,
    valid_sort_fields=("name", "days"),
    default_sort_by="name",
)
NO_SORT = PageSortConfig(default_limit=12, max_limit=12)
# Never passed through page_sort_dependency: the startup check would reject it.
INVALID_DEFAULT_SORT = PageSortConfig(
    default_limit=12,
    max_limit=12,
    valid_sort_fields=("name", "days"),
    default_sort_by="invalid",
)


def _unchecked_page_sort(request: Request) -> PageSortRequest:
    result = normalize_page_sort(request.query_params, INVALID_DEFAULT_SORT)
    if isinstance(result, ValidationFailure):
        raise result.to_exception()
    return result


def _build_router() -> APIRouter:
    router = APIRouter(prefix="/items")

    @router.get("")
    async def items(page_sort: PageSortRequest = Depends(page_sort_dependency(ITEMS))) -> Dict[str, Any]:
        return page_sort.model_dump(mode="json", by_alias=True)

    @router.get("/default-sort")
    async def default_sort(
        page_sort: PageSortRequest = Depends(page_sort_dependency(DEFAULT_SORT)),
    ) -> Dict[str, Any]:
        return page_sort.model_dump(mode="json", by_alias=True)

    @router.get("/no-sort")
    async def no_sort(page_sort: PageSortRequest = Depends(page_sort_dependency(NO_SORT))) -> Dict[str, Any]:
        return page_sort.model_dump(mode="json", by_alias=True)

    @router.get("/invalid-sort")
    async def invalid_sort(page_sort: PageSortRequest = Depends(_unchecked_page_sort)) -> Dict[str, Any]:
        return page_sort.model_dump(mode="json", by_alias=True)

    return router


@pytest.fixture
def app():
    application = create_app()
    application.include_router(_build_router())
    return application


async def _get(app, url: str):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.get(url)


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/items", {"offset": 0, "limit": 12, "sortBy": None, "sortDir": "asc"}),
        ("/items?offset=2&limit=5", {"offset": 2, "limit": 5, "sortBy": None, "sortDir": "asc"}),
        ("/items?sortBy=name&sortDir=asc", {"offset": 0, "limit": 12, "sortBy": "name", "sortDir": "asc"}),
        ("/items?sortBy=days&sortDir=desc", {"offset": 0, "limit": 12, "sortBy": "days", "sortDir": "desc"}),
        ("/items?sortBy=name&sortDir=DESC", {"offset": 0, "limit": 12, "sortBy": "name", "sortDir": "desc"}),
        ("/items?sortBy=&sortDir=desc", {"offset": 0, "limit": 12, "sortBy": "", "sortDir": "desc"}),
        ("/items?sortDir=desc&limit=5&sortBy=days&offset=1", {"offset": 1, "limit": 5, "sortBy": "days", "sortDir": "desc"}),
        ("/items/no-sort?offset=1&limit=5", {"offset": 1, "limit": 5, "sortBy": None, "sortDir": "asc"}),
        ("/items/default-sort", {"offset": 0, "limit": 12, "sortBy": "name", "sortDir": "asc"}),
        ("/items/default-sort?sortBy=days", {"offset": 0, "limit": 12, "sortBy": "days", "sortDir": "asc"}),
        ("/items/default-sort?sortBy=", {"offset": 0, "limit": 12, "sortBy": "name", "sortDir": "asc"}),
        ("/items/default-sort?sortDir=desc", {"offset": 0, "limit": 12, "sortBy": "name", "sortDir": "desc"}),
    ],
)
async def test_accepted_requests(app, url, expected) -> None:
    response = await _get(app, url)

    assert response.status_code == 200
    assert response.json() == expected


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("url", "message"),
    [
        ("/items?sortBy=invalid&sortDir=asc", "Invalid sort field: invalid. Valid options are: name, days"),
        ("/items?sortBy=name&sortDir=invalid", "Invalid sort direction: invalid. Valid options are: asc, desc"),
        ("/items?limit=1000", "Limit cannot be greater than 12"),
        ("/items?offset=-1", "Offset cannot be less than 0"),
        ("/items?limit=0", "Limit cannot be less than 1"),
        ("/items?offset=abc", "Invalid offset parameter: abc"),
        ("/items?limit=abc", "Invalid limit parameter: abc"),
        ("/items/no-sort?sortBy=name", "Sorting is not allowed for this resource"),
        ("/items/invalid-sort", "Invalid sort field: invalid. Valid options are: name, days"),
    ],
)
async def test_rejected_requests(app, url, message) -> None:
    response = await _get(app, url)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == 400
    assert body["message"] == message


@pytest.mark.anyio
async def test_rejection_carries_field_context(app) -> None:
    response = await _get(app, "/items?limit=abc")

    assert response.json()["data"] == {"field": "limit", "value": "abc", "kind": "parameter_parse"}


@pytest.mark.anyio
async def test_first_of_repeated_values_wins(app) -> None:
    response = await _get(app, "/items?offset=1&offset=2")

    assert response.status_code == 200
    assert response.json()["offset"] == 1


@pytest.mark.anyio
async def test_validation_handler_can_be_disabled() -> None:
    application = create_app(Settings(exception_handling_enabled=False))
    application.include_router(_build_router())

    async with AsyncClient(
        transport=ASGITransport(app=application, raise_app_exceptions=False), base_url="http://test"
    ) as client:
        response = await client.get("/items?offset=-1")

    # unhandled, so the error surfaces as a plain server error
    assert response.status_code == 500


@pytest.mark.anyio
async def test_oversized_number_is_a_bad_request(app) -> None:
    huge = "9" * 5000

    response = await _get(app, f"/items?limit={huge}")

    assert response.status_code == 400
    assert response.json()["message"] == f"Invalid limit parameter: {huge}"
