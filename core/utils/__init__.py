"""Utility helpers shared across core packages.

Kept limited to environment helpers: ``core.config`` and
``config.pagination`` both import from here during start-up, so anything
heavier would drag feature modules into the import chain.
"""

from .env import get_bool_env, get_env, get_int_env, get_node_env, is_local, is_production

__all__ = [
    "get_bool_env",
    "get_env",
    "get_int_env",
    "get_node_env",
    "is_local",
    "is_production",
]
