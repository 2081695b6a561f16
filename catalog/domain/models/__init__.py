"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import NameMatch, UniqueField
from .items import CatalogItem, ItemFilter
from .outcomes import (
    CatalogServiceError,
    CreateError,
    ItemInvalid,
    ItemNotExists,
    NameExists,
    SerialExists,
    UpdateError,
    VersionInvalid,
    VersionOutdated,
)
from .profiles import BOOK_PROFILE, CAR_PROFILE, MAX_RATING, PROFILES, CatalogProfile

__all__ = [
    # enums
    "NameMatch",
    "UniqueField",
    # items
    "CatalogItem",
    "ItemFilter",
    # profiles
    "BOOK_PROFILE",
    "CAR_PROFILE",
    "MAX_RATING",
    "PROFILES",
    "CatalogProfile",
    # outcomes
    "CatalogServiceError",
    "CreateError",
    "UpdateError",
    "ItemInvalid",
    "ItemNotExists",
    "NameExists",
    "SerialExists",
    "VersionInvalid",
    "VersionOutdated",
]
