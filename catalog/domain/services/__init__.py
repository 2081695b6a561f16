"""Domain services package."""

from .items import ItemService
from .notification import NotificationError, Notifier, NullNotifier
from .uniqueness import UniquenessChecker

__all__ = [
    "ItemService",
    "NotificationError",
    "Notifier",
    "NullNotifier",
    "UniquenessChecker",
]
