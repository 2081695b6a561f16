"""SQLAlchemy implementation of ItemRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.enums import NameMatch, UniqueField
from catalog.domain.models.items import CatalogItem as DomainItem
from catalog.domain.models.items import ItemFilter
from catalog.domain.repositories.items import ItemRepository
from catalog.infrastructure.persistence.models.items import CatalogItem as OrmItem

_UNIQUE_COLUMNS = {
    UniqueField.NAME: OrmItem.name,
    UniqueField.SERIAL: OrmItem.serial,
}


def _is_uuid(value: str | None) -> bool:
    if value is None:
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


class SqlItemRepository(ItemRepository):
    def __init__(self, session: AsyncSession, profile_key: str) -> None:
        self._session = session
        self.profile_key = profile_key

    @staticmethod
    def _to_domain(row: OrmItem) -> DomainItem:
        return DomainItem(
            id=str(row.id),
            version=row.version,
            name=row.name,
            category=row.category,
            vendor=row.vendor,
            rating=row.rating,
            price=row.price,
            discount=row.discount,
            available=row.available,
            release_date=row.release_date,
            serial=row.serial,
            homepage=row.homepage,
            tags=list(row.tags or []),
            contributors=list(row.contributors or []),
        )

    @staticmethod
    def _replaceable(entity: DomainItem) -> dict[str, Any]:
        # serial is fixed at insert time.
        return {
            "name": entity.name,
            "category": entity.category,
            "vendor": entity.vendor,
            "rating": entity.rating,
            "price": entity.price,
            "discount": entity.discount,
            "available": entity.available,
            "release_date": entity.release_date,
            "homepage": entity.homepage,
            "tags": list(entity.tags),
            "contributors": list(entity.contributors),
        }

    async def find_by_id(self, item_id: str) -> DomainItem | None:
        if not _is_uuid(item_id):
            return None
        stmt = select(OrmItem).where(OrmItem.profile == self.profile_key, OrmItem.id == item_id)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def find(self, criteria: ItemFilter) -> list[DomainItem]:
        stmt = select(OrmItem).where(OrmItem.profile == self.profile_key).order_by(OrmItem.name)
        if criteria.name is not None:
            if criteria.name_match is NameMatch.SUBSTRING:
                stmt = stmt.where(OrmItem.name.icontains(criteria.name, autoescape=True))
            else:
                stmt = stmt.where(OrmItem.name == criteria.name)
        if criteria.category is not None:
            stmt = stmt.where(OrmItem.category == criteria.category)
        if criteria.vendor is not None:
            stmt = stmt.where(OrmItem.vendor == criteria.vendor)
        if criteria.rating is not None:
            stmt = stmt.where(OrmItem.rating == criteria.rating)
        if criteria.available is not None:
            stmt = stmt.where(OrmItem.available == criteria.available)
        for tag in criteria.tags:
            stmt = stmt.where(OrmItem.tags.contains([tag]))
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        column = _UNIQUE_COLUMNS[field]
        stmt = (
            select(OrmItem.id)
            .where(OrmItem.profile == self.profile_key, column == value)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_one_by_field(self, field: UniqueField, value: str) -> DomainItem | None:
        column = _UNIQUE_COLUMNS[field]
        stmt = select(OrmItem).where(OrmItem.profile == self.profile_key, column == value)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def insert(self, entity: DomainItem) -> str:
        item_id = str(uuid4())
        row = OrmItem(
            id=item_id,
            profile=self.profile_key,
            version=0,
            serial=entity.serial,
            **self._replaceable(entity),
        )
        self._session.add(row)
        await self._session.flush()
        return item_id

    async def replace(self, entity: DomainItem, expected_version: int) -> int | None:
        if not _is_uuid(entity.id):
            return None
        stmt = (
            update(OrmItem)
            .where(
                OrmItem.profile == self.profile_key,
                OrmItem.id == entity.id,
                OrmItem.version == expected_version,
            )
            .values(version=OrmItem.version + 1, **self._replaceable(entity))
            .returning(OrmItem.version)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, id: str) -> bool:
        if not _is_uuid(id):
            return False
        stmt = select(OrmItem).where(OrmItem.profile == self.profile_key, OrmItem.id == id)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            return False
        await self._session.delete(row)
        return True
