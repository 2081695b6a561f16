"""Catalog item repository interface."""

from __future__ import annotations

from abc import abstractmethod

from catalog.domain.models.enums import UniqueField
from catalog.domain.models.items import CatalogItem, ItemFilter

from .base import Repository


class ItemRepository(Repository[CatalogItem]):
    """Read/write interface for CatalogItem entities of one profile.

    Every instance is bound to a single profile key; lookups, uniqueness
    checks and inserts never cross profiles.
    find_by_id and find_one_by_field both return None when no match exists.
    """

    profile_key: str

    async def get(self, id: str) -> CatalogItem | None:
        """Delegate to find_by_id for a consistent base-interface contract."""
        return await self.find_by_id(id)

    @abstractmethod
    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        """Return the item with the given id, or None."""

    @abstractmethod
    async def find(self, criteria: ItemFilter) -> list[CatalogItem]:
        """Return all items matching criteria, ordered by name."""

    @abstractmethod
    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        """Return True if any item has the given value in a unique field."""

    @abstractmethod
    async def find_one_by_field(self, field: UniqueField, value: str) -> CatalogItem | None:
        """Return the item owning value in a unique field, or None."""
