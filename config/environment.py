"""Environment detection and helpers."""

from __future__ import annotations

import os
from typing import Literal

Environment = Literal["development", "production", "test"]


def get_node_env() -> Environment:
    """Return the current runtime environment label."""

    raw = os.getenv("NODE_ENV", "development").lower()
    if raw in ("development", "production", "test"):
        return raw  # type: ignore[return-value]
    return "development"


ENVIRONMENT: Environment = get_node_env()
IS_DEVELOPMENT = ENVIRONMENT == "development"
IS_PRODUCTION = ENVIRONMENT == "production"
IS_TEST = ENVIRONMENT == "test"

__all__ = [
    "Environment",
    "get_node_env",
    "ENVIRONMENT",
    "IS_DEVELOPMENT",
    "IS_PRODUCTION",
    "IS_TEST",
]
