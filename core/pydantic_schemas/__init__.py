"""Public pydantic schema exports for FastAPI interfaces."""

from .api_envelope import ApiResponse, api_response, error, ok, page_meta

__all__ = [
    "ApiResponse",
    "api_response",
    "error",
    "ok",
    "page_meta",
]
