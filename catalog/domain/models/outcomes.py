"""Business outcomes of ItemService operations.

Every recoverable failure of create/update is returned as one of these
values, never raised.  Callers dispatch on the concrete type; the REST
adapter maps each type to an HTTP status.  Infrastructure faults (store
unreachable, driver errors) are not modelled here and propagate as
exceptions.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict


class CatalogServiceError(BaseModel):
    """Common base of all business outcomes."""

    model_config = ConfigDict(frozen=True)


class ItemInvalid(CatalogServiceError):
    """The candidate violates the item schema.

    messages holds one human-readable message per invalid field.
    """

    messages: dict[str, str]


class NameExists(CatalogServiceError):
    """Another live item of the same profile already uses this name."""

    name: str
    id: str | None = None


class SerialExists(CatalogServiceError):
    """Another live item of the same profile already uses this serial."""

    serial: str
    id: str | None = None


class VersionInvalid(CatalogServiceError):
    """The version token is absent or not a non-negative integer."""

    version: str | None = None

    @property
    def missing(self) -> bool:
        return self.version is None


class VersionOutdated(CatalogServiceError):
    """The caller's version is older than the stored one."""

    id: str
    version: int


class ItemNotExists(CatalogServiceError):
    """The item to update has no id or is not (or no longer) stored."""

    id: str | None = None


CreateError = Union[ItemInvalid, NameExists, SerialExists]
UpdateError = Union[ItemInvalid, ItemNotExists, NameExists, VersionInvalid, VersionOutdated]
