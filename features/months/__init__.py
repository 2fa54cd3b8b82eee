"""Month names listing, a worked example of page/sort parameters."""

from .routes import router

__all__ = ["router"]
