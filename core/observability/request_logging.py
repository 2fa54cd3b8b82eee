"""Request logging helpers for HTTP traffic."""
from __future__ import annotations

import logging
import urllib.parse

from fastapi import FastAPI, Request

# Paths to skip HTTP request logging (probes)
_QUIET_PATH_PREFIXES = ("/health",)
_SENSITIVE_QUERY_KEYS = {
    "access_token",
    "api_key",
    "apikey",
    "auth_token",
    "password",
    "secret",
    "token",
}
_TOKEN_PREVIEW_LENGTH = 12


def _redact_token(token_value: str) -> str:
    """Return a preview of sensitive tokens while hiding the rest."""

    if len(token_value) <= _TOKEN_PREVIEW_LENGTH:
        return "***"
    return f"{token_value[:_TOKEN_PREVIEW_LENGTH]}***"


def _format_client_address(client: tuple[str, int] | None) -> str:
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}" if port is not None else host


def format_query(query: str) -> str:
    """Return ``query`` with sensitive values masked, or ``<none>`` when empty."""

    if not query:
        return "<none>"

    params = urllib.parse.parse_qsl(query, keep_blank_values=True)
    if not any(key.lower() in _SENSITIVE_QUERY_KEYS for key, _ in params):
        return query

    redacted = [
        (key, _redact_token(value) if key.lower() in _SENSITIVE_QUERY_KEYS else value)
        for key, value in params
    ]
    return urllib.parse.urlencode(redacted)


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request and its response status."""

    if getattr(app.state, "_http_request_logging_installed", False):  # pragma: no cover - idempotence
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        is_quiet = any(path.startswith(prefix) for prefix in _QUIET_PATH_PREFIXES)

        if not is_quiet:
            client = request.client
            client_addr = _format_client_address((client.host, client.port) if client else None)
            logger.info(
                "HTTP %s %s from %s query=%s",
                request.method,
                path,
                client_addr,
                format_query(request.url.query),
            )

        response = await call_next(request)

        if not is_quiet and response.status_code >= 400:
            logger.info("HTTP %s %s -> %s", request.method, path, response.status_code)
        return response

    app.state._http_request_logging_installed = True


__all__ = ["format_query", "register_http_request_logging"]
