"""Catalog item service.

Orchestrates validation, uniqueness checks, the version guard and the item
store into the four catalog operations.

Every business failure is returned as a typed outcome value
(catalog.domain.models.outcomes); exceptions are reserved for infrastructure
faults and propagate to the caller unchanged.  Notifier failures are the
one exception: they are logged and create still returns the new id.  A
failed validation or uniqueness check never writes anything.

Update pipeline (short-circuits in this order):
    parse_version        → VersionInvalid
    validation.parse     → ItemInvalid
    name owner ≠ self    → NameExists
    id missing           → ItemNotExists
    repository.get       → ItemNotExists
    compare_version      → VersionOutdated
    replace(expected=v)  → new version, or ItemNotExists / VersionOutdated
                           when the item vanished or changed since the read

The final replace is conditioned on the version read a moment earlier, so
two concurrent updates carrying the same token cannot both succeed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.domain.models.enums import NameMatch, UniqueField
from catalog.domain.models.items import CatalogItem, ItemFilter
from catalog.domain.models.outcomes import (
    ItemInvalid,
    ItemNotExists,
    NameExists,
    SerialExists,
    VersionInvalid,
    VersionOutdated,
)
from catalog.domain.models.profiles import CatalogProfile
from catalog.domain.repositories.items import ItemRepository
from catalog.settings import CatalogSettings

from . import validation
from .notification import Notifier, NullNotifier
from .uniqueness import UniquenessChecker
from .versioning import compare_version, parse_version

logger = logging.getLogger(__name__)


class ItemService:
    """Application core for the items of one catalog profile.

    All collaborators are injected; the service keeps no state between
    calls and holds no locks.
    """

    def __init__(
        self,
        repository: ItemRepository,
        profile: CatalogProfile,
        settings: CatalogSettings,
        notifier: Notifier | None = None,
    ) -> None:
        self._repository = repository
        self._profile = profile
        self._settings = settings
        self._notifier = notifier or NullNotifier()
        self._uniqueness = UniquenessChecker(repository)

    @property
    def profile(self) -> CatalogProfile:
        return self._profile

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        """Return the item or None; absence is not an error."""
        logger.debug("find_by_id: profile=%s id=%s", self._profile.key, item_id)
        item = await self._repository.get(item_id)
        logger.debug("find_by_id: item=%s", item)
        return item

    async def find(self, criteria: ItemFilter | None = None) -> list[CatalogItem]:
        """Return matching items ordered by name; an empty filter returns all."""
        criteria = self._with_name_match(criteria or ItemFilter())
        logger.debug("find: profile=%s criteria=%s", self._profile.key, criteria)
        items = await self._repository.find(criteria)
        logger.debug("find: %d item(s)", len(items))
        return items

    def _with_name_match(self, criteria: ItemFilter) -> ItemFilter:
        # Names shorter than the threshold match as substrings, longer ones exactly.
        if criteria.name is None:
            return criteria
        if len(criteria.name) < self._settings.name_substring_threshold:
            return criteria.model_copy(update={"name_match": NameMatch.SUBSTRING})
        return criteria.model_copy(update={"name_match": NameMatch.EXACT})

    # ------------------------------------------------------------------ #
    # Commands                                                             #
    # ------------------------------------------------------------------ #

    async def create(
        self, draft: Mapping[str, Any]
    ) -> str | ItemInvalid | NameExists | SerialExists:
        """Persist a new item and return its id, or the reason it was rejected."""
        logger.debug("create: profile=%s draft=%s", self._profile.key, draft)

        parsed = validation.parse(draft, self._profile, require_serial=True)
        if isinstance(parsed, ItemInvalid):
            logger.debug("create: invalid %s", parsed.messages)
            return parsed

        if await self._uniqueness.exists_by_field(UniqueField.NAME, parsed.name):
            owner = await self._uniqueness.owner_of(UniqueField.NAME, parsed.name)
            logger.warning("create: name %r already exists (id=%s)", parsed.name, owner)
            return NameExists(name=parsed.name, id=owner)

        serial = parsed.serial
        if serial is not None and await self._uniqueness.exists_by_field(
            UniqueField.SERIAL, serial
        ):
            owner = await self._uniqueness.owner_of(UniqueField.SERIAL, serial)
            logger.warning("create: serial %r already exists (id=%s)", serial, owner)
            return SerialExists(serial=serial, id=owner)

        item = parsed.to_item().model_copy(update={"id": None, "version": 0})
        item_id = await self._repository.insert(item)
        logger.info("create: profile=%s id=%s", self._profile.key, item_id)

        await self._notify(item.model_copy(update={"id": item_id}))
        return item_id

    async def update(
        self, candidate: Mapping[str, Any], version_token: str | None
    ) -> int | ItemInvalid | ItemNotExists | NameExists | VersionInvalid | VersionOutdated:
        """Replace an existing item and return its new version, or the reason it was rejected.

        candidate carries the item id under "id"; version_token is the
        caller's last seen version (None when the caller sent none).
        """
        logger.debug(
            "update: profile=%s candidate=%s version=%r",
            self._profile.key,
            candidate,
            version_token,
        )

        version = parse_version(version_token)
        if isinstance(version, VersionInvalid):
            return version

        parsed = validation.parse(candidate, self._profile)
        if isinstance(parsed, ItemInvalid):
            logger.debug("update: invalid %s", parsed.messages)
            return parsed

        owner = await self._uniqueness.owner_of(UniqueField.NAME, parsed.name)
        if owner is not None and owner != parsed.id:
            logger.warning("update: name %r already belongs to %s", parsed.name, owner)
            return NameExists(name=parsed.name, id=owner)

        if parsed.id is None:
            return ItemNotExists(id=None)

        stored = await self._repository.get(parsed.id)
        if stored is None:
            logger.debug("update: id=%s not found", parsed.id)
            return ItemNotExists(id=parsed.id)

        outdated = compare_version(parsed.id, version, stored.version)
        if outdated is not None:
            return outdated

        item = parsed.to_item().model_copy(update={"serial": stored.serial})
        new_version = await self._repository.replace(item, expected_version=stored.version)
        if new_version is None:
            return await self._lost_race(parsed.id, version)

        logger.info("update: id=%s version=%d", parsed.id, new_version)
        return new_version

    async def _lost_race(self, item_id: str, version: int) -> ItemNotExists | VersionOutdated:
        # The conditional replace matched nothing: the item was deleted or
        # another update incremented its version after our read.
        if await self._repository.get(item_id) is None:
            logger.warning("update: id=%s deleted concurrently", item_id)
            return ItemNotExists(id=item_id)
        logger.warning("update: id=%s modified concurrently", item_id)
        return VersionOutdated(id=item_id, version=version)

    async def delete(self, item_id: str) -> bool:
        """Remove the item; False when there was nothing to remove."""
        deleted = await self._repository.delete(item_id)
        logger.debug("delete: profile=%s id=%s deleted=%s", self._profile.key, item_id, deleted)
        return deleted

    async def _notify(self, item: CatalogItem) -> None:
        try:
            await self._notifier.send(item)
        except Exception:
            logger.exception("create: notification for id=%s failed", item.id)
