"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in catalog/infrastructure/persistence/
and are wired at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - Identifiers are opaque strings assigned by the store on insert.
  - replace() is conditional: it only writes when the stored version still
    equals expected_version, and reports a miss with None instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for a versioned domain entity."""

    @abstractmethod
    async def get(self, id: str) -> T | None:
        """Return the entity with the given identifier, or None if not found."""

    @abstractmethod
    async def insert(self, entity: T) -> str:
        """Persist a new entity at version 0 and return its store-assigned id."""

    @abstractmethod
    async def replace(self, entity: T, expected_version: int) -> int | None:
        """Overwrite the stored entity and increment its version by exactly 1.

        Returns the new version, or None when no entity with that id and
        expected_version exists (deleted or modified concurrently).
        """

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Remove the entity; True iff something was removed."""
