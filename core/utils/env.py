"""Common environment helpers used across the service."""

from __future__ import annotations

import os

from core.exceptions import ConfigurationError

__all__ = [
    "get_bool_env",
    "get_env",
    "get_int_env",
    "get_node_env",
    "is_local",
    "is_production",
]

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_int_env(key: str, default: int) -> int:
    """Return an integer environment variable, failing loudly on garbage."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(
            f"Environment variable {key} must be an integer, got {raw!r}", key=key
        ) from exc


def get_bool_env(key: str, default: bool) -> bool:
    """Return a boolean environment variable (``true``/``false``, ``1``/``0``...)."""

    raw = (get_env(key) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigurationError(
        f"Environment variable {key} must be a boolean, got {raw!r}", key=key
    )


def get_node_env() -> str:
    """Return the current runtime environment label."""

    return (get_env("NODE_ENV", default="local") or "local").strip()


def is_production() -> bool:
    """True when running in production."""

    return get_node_env() == "production"


def is_local() -> bool:
    """True when running locally."""

    return get_node_env() == "local"
