"""Catalog item ORM model: one table for every profile."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Double,
    Integer,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from catalog.infrastructure.database import Base


class CatalogItem(Base):
    """Versioned catalog record.

    profile scopes uniqueness: name and serial are unique per profile,
    not globally.  version is incremented by the repository's conditional
    UPDATE, never by the application directly.
    tags and contributors are JSONB arrays; tags are stored as submitted
    and matched with the JSONB containment operator.
    """

    __tablename__ = "catalog_items"
    __table_args__ = (
        UniqueConstraint("profile", "name", name="uq_catalog_items_profile_name"),
        UniqueConstraint("profile", "serial", name="uq_catalog_items_profile_serial"),
        CheckConstraint("version >= 0", name="ck_catalog_items_version_non_negative"),
    )

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    profile: Mapped[str] = mapped_column(Text, nullable=False)  # book / car
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    vendor: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[Optional[float]] = mapped_column(Double, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Double, nullable=True)
    discount: Mapped[Optional[float]] = mapped_column(Double, nullable=True)
    available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    release_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    serial: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # immutable after insert
    homepage: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    contributors: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
