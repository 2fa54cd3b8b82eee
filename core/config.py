"""Minimal environment variable loading and settings dataclass.

Domain-specific configuration lives in config/ subdirectories:
- Page/sort defaults: config.pagination
- Environment detection: config.environment

This module only handles:
1. Environment detection (delegates to config.environment)
2. Feature toggles (minimal set)
3. Settings dataclass for dependency injection
"""

from __future__ import annotations

from dataclasses import dataclass

from config import environment

# Re-export environment helpers
from config.environment import (
    get_node_env,
    ENVIRONMENT,
    IS_DEVELOPMENT,
    IS_PRODUCTION,
    IS_TEST,
)
from core.utils.env import get_bool_env

# Feature toggles
DEBUG_MODE = get_bool_env("DEBUG_MODE", False)
# Disable to let the embedding application map PageSortValidationError itself
EXCEPTION_HANDLING_ENABLED = get_bool_env("PAGESORT_EXCEPTION_HANDLING_ENABLED", True)


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for cross-cutting settings."""

    environment: str = ENVIRONMENT
    debug_mode: bool = DEBUG_MODE
    exception_handling_enabled: bool = EXCEPTION_HANDLING_ENABLED


settings = Settings()

__all__ = [
    # Environment
    "environment",
    "get_node_env",
    "ENVIRONMENT",
    "IS_DEVELOPMENT",
    "IS_PRODUCTION",
    "IS_TEST",
    # Feature toggles
    "DEBUG_MODE",
    "EXCEPTION_HANDLING_ENABLED",
    # Settings
    "Settings",
    "settings",
]
