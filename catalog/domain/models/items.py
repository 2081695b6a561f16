"""Catalog item domain models.

These are pure domain objects: no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import NameMatch


class CatalogItem(BaseModel):
    """A versioned catalog record (a book, a car, ...).

    id is assigned by the store on insert and never reassigned.
    version starts at 0 and is incremented by the store on every
    successful replace; callers never set it directly.
    serial is immutable after insert.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    version: int = Field(default=0, ge=0)
    name: str
    category: str
    vendor: str
    rating: float | None = None
    price: float | None = None
    discount: float | None = None
    available: bool | None = None
    release_date: date | None = None
    serial: str | None = None
    homepage: str | None = None
    tags: list[str] = Field(default_factory=list)
    contributors: list[dict[str, Any]] = Field(default_factory=list)

    def attributes(self) -> dict[str, Any]:
        """Business attributes only, without the store-assigned id and version."""
        return self.model_dump(exclude={"id", "version"})


class ItemFilter(BaseModel):
    """Closed set of query criteria understood by ItemRepository.find().

    tags are matched by exact membership and normalised to uppercase.
    name_match is decided by the service from the length of the name
    filter; repositories only honour it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    category: str | None = None
    vendor: str | None = None
    rating: float | None = None
    available: bool | None = None
    tags: list[str] = Field(default_factory=list)
    name_match: NameMatch = NameMatch.EXACT

    @field_validator("tags")
    @classmethod
    def _canonical_tags(cls, value: list[str]) -> list[str]:
        return [tag.strip().upper() for tag in value if tag.strip()]

    @property
    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.category is None
            and self.vendor is None
            and self.rating is None
            and self.available is None
            and not self.tags
        )
