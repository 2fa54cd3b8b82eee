"""Unit tests for the page/sort value types."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import PageSortValidationError, ValidationError
from core.pagination import FailureKind, PageSortConfig, PageSortRequest, SortDirection, ValidationFailure


def test_request_defaults():
    request = PageSortRequest()

    assert (request.offset, request.limit, request.sort_by, request.sort_dir) == (
        0,
        25,
        None,
        SortDirection.ASC,
    )


def test_request_resets_out_of_range_values():
    request = PageSortRequest(offset=-3, limit=0)

    assert (request.offset, request.limit) == (0, 25)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, "asc"), ("", "asc"), ("DESC", "desc"), ("desc", "desc"), ("sideways", "asc")],
)
def test_request_normalises_sort_direction(raw, expected):
    assert PageSortRequest(sort_dir=raw).sort_dir.value == expected


def test_request_is_frozen():
    request = PageSortRequest(offset=1)

    with pytest.raises(PydanticValidationError):
        request.offset = 2  # type: ignore[misc]


def test_request_serialises_with_wire_names():
    request = PageSortRequest(offset=2, limit=5, sort_by="days", sort_dir="desc")

    assert request.model_dump(mode="json", by_alias=True) == {
        "offset": 2,
        "limit": 5,
        "sortBy": "days",
        "sortDir": "desc",
    }


def test_request_accepts_wire_names():
    request = PageSortRequest.model_validate({"sortBy": "name", "sortDir": "DESC"})

    assert (request.sort_by, request.sort_dir) == ("name", SortDirection.DESC)


def test_sql_sort_direction_helpers():
    assert PageSortRequest().sql_sort_direction == "ASC"
    assert PageSortRequest(sort_dir="desc").sql_sort_direction == "DESC"
    assert PageSortRequest(sort_dir="desc").is_ascending is False


@pytest.mark.parametrize(("sort_by", "expected"), [(None, False), ("", False), (" ", False), ("name", True)])
def test_is_sorted(sort_by, expected):
    assert PageSortRequest(sort_by=sort_by).is_sorted is expected


def test_config_is_frozen_and_keeps_field_order():
    config = PageSortConfig(valid_sort_fields=["name", "days", "name"])

    assert config.valid_sort_fields == ("name", "days")
    assert config.sorting_allowed is True
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_limit = 5  # type: ignore[misc]


def test_config_defaults():
    config = PageSortConfig()

    assert (
        config.min_offset,
        config.default_offset,
        config.min_limit,
        config.max_limit,
        config.default_limit,
        config.valid_sort_fields,
        config.default_sort_by,
    ) == (0, 0, 1, 100, 25, (), None)
    assert config.sorting_allowed is False
    assert "max_limit=100" in config.describe()


def test_failure_converts_to_exception():
    failure = ValidationFailure(
        "Invalid limit parameter: abc",
        kind=FailureKind.PARAMETER_PARSE,
        field="limit",
        value="abc",
    )

    exc = failure.to_exception()

    assert isinstance(exc, PageSortValidationError)
    assert isinstance(exc, ValidationError)
    assert str(exc) == "Invalid limit parameter: abc"
    assert (exc.field, exc.value, exc.kind) == ("limit", "abc", "parameter_parse")


def test_failure_context_skips_missing_values():
    failure = ValidationFailure("Sorting is not allowed for this resource", kind=FailureKind.SORT_FIELD_DISALLOWED)

    assert failure.to_context() == {"kind": "sort_field_disallowed"}
