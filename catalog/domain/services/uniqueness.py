"""Uniqueness checks against the item store."""

from __future__ import annotations

import logging

from catalog.domain.models.enums import UniqueField
from catalog.domain.repositories.items import ItemRepository

logger = logging.getLogger(__name__)


class UniquenessChecker:
    """Indexed lookups for unique-field conflicts.

    Used by ItemService only.  Store failures propagate unchanged; there is
    no business error channel here.
    """

    def __init__(self, repository: ItemRepository) -> None:
        self._repository = repository

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        exists = await self._repository.exists_by_field(field, value)
        logger.debug("exists_by_field: %s=%r exists=%s", field.value, value, exists)
        return exists

    async def owner_of(self, field: UniqueField, value: str) -> str | None:
        """Return the id of the item holding value in field, or None."""
        owner = await self._repository.find_one_by_field(field, value)
        return owner.id if owner is not None else None
