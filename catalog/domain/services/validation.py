"""Validation engine for catalog item candidates.

A candidate is the raw mapping a caller submits (a decoded JSON body, a
dict built in Python).  It is checked in one pass against ItemCandidate:
structural types and bounds come from the model's field declarations,
category, vendor and serial rules come from the CatalogProfile passed as
validation context.  Pydantic reports every failing field, so unrelated
errors never mask each other.

Each failing top-level field is translated through a fixed message table;
the result is a {field: message} mapping that is empty when the candidate
is valid.  Validation has no side effects.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from catalog.domain.models.items import CatalogItem
from catalog.domain.models.outcomes import ItemInvalid
from catalog.domain.models.profiles import MAX_RATING, CatalogProfile

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$"
)
NAME_PATTERN = re.compile(r"^\w", re.UNICODE)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
HOMEPAGE_PATTERN = re.compile(r"^(https?://|www\.)[a-z0-9-]+(\.[a-z0-9-]+)+([/?].*)?$")

MISSING_MESSAGE = "is required"

_FIXED_MESSAGES: dict[str, str] = {
    "item": "must be an object",
    "id": "must be a UUID",
    "version": "must be a non-negative integer",
    "name": "must start with a letter, a digit or an underscore",
    "category": "must be one of the allowed categories",
    "rating": f"must be between 0 and {MAX_RATING}",
    "price": "must not be negative",
    "discount": "must be a value between 0 and 1",
    "available": "must be set to true or false",
    "release_date": "must match YYYY-MM-DD",
    "homepage": "must be a valid URL",
    "tags": "must be a list of strings",
    "contributors": "must be a list of objects",
}


def message_table(profile: CatalogProfile) -> dict[str, str]:
    """Return the field → message table for a profile."""
    return {
        **_FIXED_MESSAGES,
        "vendor": f"must be one of the allowed {profile.vendor_label}s",
        "serial": f"must be a valid {profile.serial_label}",
    }


def _profile(info: ValidationInfo) -> CatalogProfile:
    return info.context["profile"]


class ItemCandidate(BaseModel):
    """Structural schema of a submitted item.

    Unknown keys are ignored.  Numeric and boolean fields are strict, so
    "5" is not accepted where 5 is expected.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    version: Annotated[int, Field(strict=True, ge=0)] | None = None
    name: StrictStr
    category: StrictStr
    vendor: StrictStr
    rating: Annotated[float, Field(strict=True, ge=0, le=MAX_RATING)] | None = None
    price: Annotated[float, Field(strict=True, ge=0)] | None = None
    discount: Annotated[float, Field(strict=True, gt=0, lt=1)] | None = None
    available: Annotated[bool, Field(strict=True)] | None = None
    release_date: date | None = None
    serial: StrictStr | None = None
    homepage: StrictStr | None = None
    tags: list[StrictStr] = Field(default_factory=list)
    contributors: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _id_is_uuid(cls, value: str | None) -> str | None:
        if value is not None and not UUID_PATTERN.match(value):
            raise ValueError("not a UUID")
        return value

    @field_validator("name")
    @classmethod
    def _name_pattern(cls, value: str) -> str:
        if not NAME_PATTERN.match(value):
            raise ValueError("name must start with a word character")
        return value

    @field_validator("category")
    @classmethod
    def _category_allowed(cls, value: str, info: ValidationInfo) -> str:
        if value not in _profile(info).categories:
            raise ValueError(f"unknown category {value!r}")
        return value

    @field_validator("vendor")
    @classmethod
    def _vendor_allowed(cls, value: str, info: ValidationInfo) -> str:
        if value not in _profile(info).vendors:
            raise ValueError(f"unknown vendor {value!r}")
        return value

    @field_validator("release_date", mode="before")
    @classmethod
    def _date_format(cls, value: Any) -> Any:
        if value is None or isinstance(value, date):
            return value
        if isinstance(value, str) and DATE_PATTERN.match(value):
            return value
        raise ValueError("date must match YYYY-MM-DD")

    @field_validator("serial")
    @classmethod
    def _serial_pattern(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is not None and not _profile(info).serial_matches(value):
            raise ValueError("serial does not match the profile pattern")
        return value

    @field_validator("homepage")
    @classmethod
    def _homepage_pattern(cls, value: str | None) -> str | None:
        if value is not None and not HOMEPAGE_PATTERN.match(value):
            raise ValueError("not a URL")
        return value

    def to_item(self) -> CatalogItem:
        """Build the domain item; version is left for the store to manage."""
        return CatalogItem(**self.model_dump(exclude={"version"}))


def _collect(exc: ValidationError, profile: CatalogProfile) -> dict[str, str]:
    table = message_table(profile)
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "item"
        if error["type"] == "missing":
            messages.setdefault(field, MISSING_MESSAGE)
        else:
            messages.setdefault(field, table.get(field, "is invalid"))
    return messages


def _check(
    candidate: Mapping[str, Any],
    profile: CatalogProfile,
    require_serial: bool,
) -> tuple[ItemCandidate | None, dict[str, str]]:
    try:
        parsed = ItemCandidate.model_validate(candidate, context={"profile": profile})
    except ValidationError as exc:
        parsed, messages = None, _collect(exc, profile)
    else:
        messages = {}

    if require_serial and isinstance(candidate, Mapping) and candidate.get("serial") is None:
        messages.setdefault("serial", MISSING_MESSAGE)

    logger.debug("validate: profile=%s messages=%s", profile.key, messages)
    return (None, messages) if messages else (parsed, messages)


def validate(
    candidate: Mapping[str, Any],
    profile: CatalogProfile,
    *,
    require_serial: bool = False,
) -> dict[str, str]:
    """Return {field: message} for every invalid field; empty when valid.

    require_serial makes serial a required field, as on create.
    """
    _, messages = _check(candidate, profile, require_serial)
    return messages


def parse(
    candidate: Mapping[str, Any],
    profile: CatalogProfile,
    *,
    require_serial: bool = False,
) -> ItemCandidate | ItemInvalid:
    """Validate and return the typed candidate, or ItemInvalid with all messages."""
    parsed, messages = _check(candidate, profile, require_serial)
    if parsed is None:
        return ItemInvalid(messages=messages)
    return parsed
