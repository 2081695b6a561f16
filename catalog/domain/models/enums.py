"""Domain enumerations for the catalog service.

String-valued enums use the str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class UniqueField(str, Enum):
    """Attributes that must be unique across all live items of a profile.

    NAME is checked on create and update; SERIAL only on create, since the
    serial is immutable once stored.
    """

    NAME = "name"
    SERIAL = "serial"


class NameMatch(str, Enum):
    """How a name filter is matched against stored names."""

    SUBSTRING = "substring"
    EXACT = "exact"
