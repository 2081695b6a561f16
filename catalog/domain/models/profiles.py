"""Catalog profiles.

A profile carries everything that differs between the item kinds the
service manages: the allowed category and vendor values, the serial
pattern, and the labels used in validation messages and notifications.
Item models, validation, persistence and the REST adapter are shared;
only the profile changes.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

MAX_RATING = 5

# https://www.oreilly.com/library/view/regular-expressions-cookbook/9781449327453/ch04s13.html
ISBN_PATTERN = (
    r"^(?:ISBN(?:-1[03])?:? )?(?=[0-9X]{10}$|"
    r"(?=(?:[0-9]+[- ]){3})[- 0-9X]{13}$|97[89][0-9]{10}$|"
    r"(?=(?:[0-9]+[- ]){4})[- 0-9]{17}$)(?:97[89][- ]?)?[0-9]{1,5}[- ]?"
    r"[0-9]+[- ]?[0-9]+[- ]?[0-9X]*"
)

# ISO 3779 vehicle identification number: 17 characters, no I, O or Q.
VIN_PATTERN = r"^[A-HJ-NPR-Z0-9]{17}$"


class CatalogProfile(BaseModel):
    """Per-kind rule data for catalog items.

    key is stored alongside every item and scopes uniqueness and queries,
    so a book and a car may share a name.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    categories: frozenset[str]
    vendors: frozenset[str]
    vendor_label: str
    serial_pattern: str
    serial_label: str

    def serial_matches(self, value: str) -> bool:
        return re.match(self.serial_pattern, value) is not None


BOOK_PROFILE = CatalogProfile(
    key="book",
    label="Book",
    categories=frozenset({"PRINT", "KINDLE"}),
    vendors=frozenset({"FOO_PUBLISHER", "BAR_PUBLISHER"}),
    vendor_label="publisher",
    serial_pattern=ISBN_PATTERN,
    serial_label="ISBN",
)

CAR_PROFILE = CatalogProfile(
    key="car",
    label="Car",
    categories=frozenset({"SEDAN", "ESTATE"}),
    vendors=frozenset({"FOO_MANUFACTURER", "BAR_MANUFACTURER"}),
    vendor_label="manufacturer",
    serial_pattern=VIN_PATTERN,
    serial_label="serial number",
)

PROFILES: dict[str, CatalogProfile] = {p.key: p for p in (BOOK_PROFILE, CAR_PROFILE)}
