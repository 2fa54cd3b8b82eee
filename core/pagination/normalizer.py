"""Turn raw list-query strings into a validated :class:`PageSortRequest`.

The pipeline runs in a fixed order and stops at the first violated rule:

1. parse ``offset`` (blank -> ``default_offset``)
2. parse ``limit`` (blank -> ``default_limit``)
3. resolve ``sortBy`` (blank -> ``default_sort_by`` when one is configured)
4. offset lower bound
5. limit lower and upper bounds
6. sort field vocabulary
7. sort direction vocabulary
8. build the request

Nothing is raised for bad input; callers receive a :class:`ValidationFailure`
and decide how to surface it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from config.pagination import LIMIT_PARAM, OFFSET_PARAM, SORT_BY_PARAM, SORT_DIR_PARAM

from .constraints import PageSortConfig
from .models import PageSortRequest, SortDirection
from .results import FailureKind, ValidationFailure

logger = logging.getLogger(__name__)

PageSortResult = Union[PageSortRequest, ValidationFailure]

_DECIMAL_INT = re.compile(r"-?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_MAX_DIGITS = len(str(_INT_MAX))
_VALID_SORT_DIRECTIONS = (SortDirection.ASC.value, SortDirection.DESC.value)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _first_value(params: Any, name: str) -> Optional[str]:
    """Return the first value supplied for ``name``.

    Accepts Starlette ``QueryParams`` (anything with ``getlist``), the
    ``dict[str, list[str]]`` produced by ``urllib.parse.parse_qs`` and plain
    ``dict[str, str]`` mappings.
    """

    getlist = getattr(params, "getlist", None)
    values = getlist(name) if callable(getlist) else params.get(name)
    if values is None:
        return None
    if isinstance(values, str):
        return values
    if isinstance(values, (list, tuple)):
        return str(values[0]) if values else None
    return str(values)


@dataclass(frozen=True)
class RawPageSortParams:
    """The four list-query parameters exactly as they arrived."""

    offset: Optional[str] = None
    limit: Optional[str] = None
    sort_by: Optional[str] = None
    sort_dir: Optional[str] = None

    @classmethod
    def from_query(cls, params: Any) -> "RawPageSortParams":
        """Build from query parameters, keeping only the first value per name."""

        return cls(
            offset=_first_value(params, OFFSET_PARAM),
            limit=_first_value(params, LIMIT_PARAM),
            sort_by=_first_value(params, SORT_BY_PARAM),
            sort_dir=_first_value(params, SORT_DIR_PARAM),
        )


def _parse_int(name: str, raw: Optional[str], default: int) -> Union[int, ValidationFailure]:
    if _is_blank(raw):
        return default

    assert raw is not None
    # length guard keeps int() away from its digit limit on huge inputs
    if _DECIMAL_INT.fullmatch(raw) and len(raw.lstrip("-").lstrip("0")) <= _INT_MAX_DIGITS:
        value = int(raw)
        if _INT_MIN <= value <= _INT_MAX:
            logger.debug("Parsed %s parameter: %s", name, value)
            return value

    logger.warning("Invalid %s parameter: '%s'", name, raw)
    return ValidationFailure(
        f"Invalid {name} parameter: {raw}",
        kind=FailureKind.PARAMETER_PARSE,
        field=name,
        value=raw,
    )


def _resolve_sort_by(raw: Optional[str], config: PageSortConfig) -> Optional[str]:
    if _is_blank(raw) and not _is_blank(config.default_sort_by):
        logger.debug("Using default sort field: %s", config.default_sort_by)
        return config.default_sort_by
    return raw


def _check_offset(offset: int, config: PageSortConfig) -> Optional[ValidationFailure]:
    if offset < config.min_offset:
        logger.warning("Invalid offset: %s is less than minimum: %s", offset, config.min_offset)
        return ValidationFailure(
            f"Offset cannot be less than {config.min_offset}",
            kind=FailureKind.RANGE_VIOLATION,
            field=OFFSET_PARAM,
            value=str(offset),
        )
    return None


def _check_limit(limit: int, config: PageSortConfig) -> Optional[ValidationFailure]:
    if limit < config.min_limit:
        logger.warning("Invalid limit: %s is less than minimum: %s", limit, config.min_limit)
        return ValidationFailure(
            f"Limit cannot be less than {config.min_limit}",
            kind=FailureKind.RANGE_VIOLATION,
            field=LIMIT_PARAM,
            value=str(limit),
        )
    if limit > config.max_limit:
        logger.warning("Invalid limit: %s is greater than maximum: %s", limit, config.max_limit)
        return ValidationFailure(
            f"Limit cannot be greater than {config.max_limit}",
            kind=FailureKind.RANGE_VIOLATION,
            field=LIMIT_PARAM,
            value=str(limit),
        )
    return None


def _check_sort_by(sort_by: Optional[str], config: PageSortConfig) -> Optional[ValidationFailure]:
    if _is_blank(sort_by):
        logger.debug("No sort field provided")
        return None

    if not config.valid_sort_fields:
        logger.warning("Sorting is not allowed but sortBy parameter was provided: %s", sort_by)
        return ValidationFailure(
            "Sorting is not allowed for this resource",
            kind=FailureKind.SORT_FIELD_DISALLOWED,
            field=SORT_BY_PARAM,
            value=sort_by,
        )

    if sort_by not in config.valid_sort_fields:
        options = ", ".join(config.valid_sort_fields)
        logger.warning("Invalid sort field: %s not in allowed fields: %s", sort_by, options)
        return ValidationFailure(
            f"Invalid sort field: {sort_by}. Valid options are: {options}",
            kind=FailureKind.SORT_FIELD_UNKNOWN,
            field=SORT_BY_PARAM,
            value=sort_by,
        )
    return None


def _check_sort_dir(sort_dir: Optional[str]) -> Optional[ValidationFailure]:
    if _is_blank(sort_dir):
        return None

    assert sort_dir is not None
    if sort_dir.lower() not in _VALID_SORT_DIRECTIONS:
        logger.warning("Invalid sort direction: %s", sort_dir)
        return ValidationFailure(
            f"Invalid sort direction: {sort_dir}. Valid options are: asc, desc",
            kind=FailureKind.SORT_DIRECTION_INVALID,
            field=SORT_DIR_PARAM,
            value=sort_dir,
        )
    return None


def normalize_page_sort(
    raw: Union[RawPageSortParams, Mapping[str, Any]],
    config: Optional[PageSortConfig] = None,
) -> PageSortResult:
    """Validate and default raw list-query parameters against ``config``.

    Args:
        raw: Either a :class:`RawPageSortParams` or a query mapping keyed by
            ``offset``/``limit``/``sortBy``/``sortDir``.
        config: Endpoint constraints; package defaults when omitted.

    Returns:
        A :class:`PageSortRequest` when every rule passed, otherwise the
        :class:`ValidationFailure` for the first rule that did not.
    """

    if not isinstance(raw, RawPageSortParams):
        raw = RawPageSortParams.from_query(raw)
    config = config or PageSortConfig()

    logger.debug(
        "Request parameters: offset=%s, limit=%s, sortBy=%s, sortDir=%s",
        raw.offset,
        raw.limit,
        raw.sort_by,
        raw.sort_dir,
    )

    offset = _parse_int(OFFSET_PARAM, raw.offset, config.default_offset)
    if isinstance(offset, ValidationFailure):
        return offset

    limit = _parse_int(LIMIT_PARAM, raw.limit, config.default_limit)
    if isinstance(limit, ValidationFailure):
        return limit

    sort_by = _resolve_sort_by(raw.sort_by, config)

    failure = (
        _check_offset(offset, config)
        or _check_limit(limit, config)
        or _check_sort_by(sort_by, config)
        or _check_sort_dir(raw.sort_dir)
    )
    if failure is not None:
        return failure

    request = PageSortRequest(
        offset=offset,
        limit=limit,
        sort_by=sort_by,
        sort_dir=SortDirection.from_raw(raw.sort_dir),
    )
    logger.debug(
        "Created PageSortRequest: offset=%s, limit=%s, sortBy=%s, sortDir=%s",
        request.offset,
        request.limit,
        request.sort_by,
        request.sort_dir.value,
    )
    return request


__all__ = ["PageSortResult", "RawPageSortParams", "normalize_page_sort"]
