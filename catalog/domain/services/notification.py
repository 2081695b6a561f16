"""Notification interface for newly created items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.models.items import CatalogItem


class NotificationError(Exception):
    """Raised by a Notifier when a message could not be delivered."""


class Notifier(ABC):
    """Best-effort announcement of a newly created item.

    Implementations raise NotificationError on delivery failure; ItemService
    logs it and carries on.
    """

    @abstractmethod
    async def send(self, item: CatalogItem) -> None:
        """Announce item (which already carries its store-assigned id)."""


class NullNotifier(Notifier):
    """Notifier that drops every message, used when mail is disabled."""

    async def send(self, item: CatalogItem) -> None:
        return None
