"""REST adapter over ItemService."""

from .app import create_app
from .items import build_router, get_settings, provide_repositories

__all__ = ["build_router", "create_app", "get_settings", "provide_repositories"]
