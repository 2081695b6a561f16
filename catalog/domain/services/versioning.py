"""Version guard for optimistic concurrency.

The caller states which revision of an item it last saw through a version
token (the value of an If-Match header on the REST side).  The guard only
classifies that token as numeric or not; whether an absent token means
"precondition required" or a malformed one "precondition failed" is left
to the caller, which can tell the two apart via VersionInvalid.missing.
"""

from __future__ import annotations

import logging
import re

from catalog.domain.models.outcomes import VersionInvalid, VersionOutdated

logger = logging.getLogger(__name__)

_VERSION_PATTERN = re.compile(r"^[0-9]+$")


def parse_version(token: str | None) -> int | VersionInvalid:
    """Return the non-negative integer in token, or VersionInvalid."""
    if token is None:
        logger.debug("parse_version: token missing")
        return VersionInvalid(version=None)

    stripped = token.strip()
    if not _VERSION_PATTERN.match(stripped):
        logger.debug("parse_version: token=%r is not numeric", token)
        return VersionInvalid(version=token)
    return int(stripped)


def compare_version(item_id: str, candidate: int, stored: int) -> VersionOutdated | None:
    """Fail only when the caller's version is strictly older than the stored one.

    An equal version means the caller has the latest revision; the update
    proceeds and the store increments it.
    """
    if candidate < stored:
        logger.debug(
            "compare_version: id=%s candidate=%d stored=%d outdated", item_id, candidate, stored
        )
        return VersionOutdated(id=item_id, version=candidate)
    return None


def format_etag(version: int) -> str:
    """Render a version as a strong entity tag, e.g. '"3"'."""
    return f'"{version}"'


def strip_etag(header: str) -> str:
    """Remove a weak-validator prefix and surrounding quotes from an entity tag."""
    tag = header.strip()
    if tag.startswith("W/"):
        tag = tag[2:]
    if len(tag) >= 2 and tag.startswith('"') and tag.endswith('"'):
        tag = tag[1:-1]
    return tag
