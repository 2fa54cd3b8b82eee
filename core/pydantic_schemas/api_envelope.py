"""Standard API response envelope helpers."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from core.pagination.models import PageSortRequest

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every JSON body the service returns, errors included."""

    code: int = Field(..., description="HTTP-like status code signalling success or failure")
    success: bool = Field(..., description="Indicates whether the operation completed successfully")
    message: str = Field(..., description="Human readable summary; failure text is returned verbatim")
    data: Optional[T] = Field(None, description="Optional domain payload")
    meta: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Page window (offset, limit, sortBy, sortDir, total) for list responses",
    )


def api_response(
    *,
    code: int = 200,
    message: str,
    data: T | None = None,
    meta: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Return a serialisable API envelope with a consistent schema."""

    envelope = ApiResponse[T](
        code=code,
        success=code < 400,
        message=message,
        data=data,
        meta=meta,
    )
    return envelope.model_dump(by_alias=True)


def ok(message: str, data: T | None = None, meta: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Shortcut for successful responses."""

    return api_response(code=200, message=message, data=data, meta=meta)


def error(
    code: int,
    message: str,
    data: Any | None = None,
    meta: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Shortcut for error responses with caller-provided status codes."""

    if code < 400:
        raise ValueError("Error responses must use an error HTTP status code (>= 400)")
    return api_response(code=code, message=message, data=data, meta=meta)


def page_meta(request: PageSortRequest, total: int | None = None) -> Dict[str, Any]:
    """Return the ``meta`` block describing the page that was served."""

    meta: Dict[str, Any] = request.model_dump(mode="json", by_alias=True)
    if total is not None:
        meta["total"] = total
    return meta


__all__ = ["ApiResponse", "api_response", "ok", "error", "page_meta"]
