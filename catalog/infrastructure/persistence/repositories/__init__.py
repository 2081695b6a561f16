"""Concrete repository implementations.

Exports the SqlItemRepository and InMemoryItemRepository classes and the
get_repositories() factory function for wiring at the application boundary
(FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.profiles import BOOK_PROFILE, CAR_PROFILE
from catalog.domain.repositories.items import ItemRepository

from .items import SqlItemRepository
from .memory import InMemoryItemRepository


@dataclass
class Repositories:
    """One item repository per catalog profile, all bound to a single AsyncSession."""

    books: ItemRepository
    cars: ItemRepository

    def for_profile(self, profile_key: str) -> ItemRepository:
        return {BOOK_PROFILE.key: self.books, CAR_PROFILE.key: self.cars}[profile_key]


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            book = await repos.books.find_by_id(book_id)
    """
    return Repositories(
        books=SqlItemRepository(session, BOOK_PROFILE.key),
        cars=SqlItemRepository(session, CAR_PROFILE.key),
    )


__all__ = [
    "SqlItemRepository",
    "InMemoryItemRepository",
    "Repositories",
    "get_repositories",
]
