"""In-memory implementation of ItemRepository for testing and development.

No method awaits between reading and mutating state, so every operation
is atomic with respect to the event loop, which mirrors the per-document
atomicity of the SQL store.
"""

from __future__ import annotations

from uuid import uuid4

from catalog.domain.models.enums import NameMatch, UniqueField
from catalog.domain.models.items import CatalogItem, ItemFilter
from catalog.domain.repositories.items import ItemRepository


class InMemoryItemRepository(ItemRepository):
    def __init__(self, profile_key: str) -> None:
        self.profile_key = profile_key
        self._items: dict[str, CatalogItem] = {}

    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        return self._items.get(item_id)

    async def find(self, criteria: ItemFilter) -> list[CatalogItem]:
        items = [item for item in self._items.values() if self._matches(item, criteria)]
        return sorted(items, key=lambda item: item.name)

    @staticmethod
    def _matches(item: CatalogItem, criteria: ItemFilter) -> bool:
        if criteria.name is not None:
            if criteria.name_match is NameMatch.SUBSTRING:
                if criteria.name.casefold() not in item.name.casefold():
                    return False
            elif item.name != criteria.name:
                return False
        if criteria.category is not None and item.category != criteria.category:
            return False
        if criteria.vendor is not None and item.vendor != criteria.vendor:
            return False
        if criteria.rating is not None and item.rating != criteria.rating:
            return False
        if criteria.available is not None and item.available != criteria.available:
            return False
        return all(tag in item.tags for tag in criteria.tags)

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        return await self.find_one_by_field(field, value) is not None

    async def find_one_by_field(self, field: UniqueField, value: str) -> CatalogItem | None:
        for item in self._items.values():
            if getattr(item, field.value) == value:
                return item
        return None

    async def insert(self, entity: CatalogItem) -> str:
        item_id = str(uuid4())
        self._items[item_id] = entity.model_copy(update={"id": item_id, "version": 0})
        return item_id

    async def replace(self, entity: CatalogItem, expected_version: int) -> int | None:
        stored = self._items.get(entity.id) if entity.id is not None else None
        if stored is None or stored.version != expected_version:
            return None
        new_version = stored.version + 1
        self._items[stored.id] = entity.model_copy(
            update={"id": stored.id, "version": new_version, "serial": stored.serial}
        )
        return new_version

    async def delete(self, id: str) -> bool:
        return self._items.pop(id, None) is not None
