"""Mapping of ItemService outcomes to HTTP responses.

    ItemInvalid                     → 400 (JSON field → message map)
    NameExists / SerialExists       → 400
    ItemNotExists (update)          → 412
    VersionInvalid, token missing   → 428
    VersionInvalid, token malformed → 412
    VersionOutdated                 → 412
"""

from __future__ import annotations

import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog.domain.models.outcomes import (
    CatalogServiceError,
    ItemInvalid,
    ItemNotExists,
    NameExists,
    SerialExists,
    VersionInvalid,
    VersionOutdated,
)
from catalog.domain.models.profiles import CatalogProfile

logger = logging.getLogger(__name__)


def status_for(outcome: CatalogServiceError) -> int:
    if isinstance(outcome, (ItemInvalid, NameExists, SerialExists)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(outcome, VersionInvalid) and outcome.missing:
        return status.HTTP_428_PRECONDITION_REQUIRED
    if isinstance(outcome, (VersionInvalid, VersionOutdated, ItemNotExists)):
        return status.HTTP_412_PRECONDITION_FAILED
    raise TypeError(f"Unmapped outcome {type(outcome).__name__}")


def _message(outcome: CatalogServiceError, profile: CatalogProfile) -> str:
    label = profile.label.lower()
    if isinstance(outcome, NameExists):
        return f'The name "{outcome.name}" already exists at {outcome.id}.'
    if isinstance(outcome, SerialExists):
        return f'The {profile.serial_label} "{outcome.serial}" already exists at {outcome.id}.'
    if isinstance(outcome, ItemNotExists):
        return f'There is no {label} with the id "{outcome.id}".'
    if isinstance(outcome, VersionInvalid):
        if outcome.missing:
            return "The version number is missing."
        return f'The version number "{outcome.version}" is invalid.'
    if isinstance(outcome, VersionOutdated):
        return f'The version number "{outcome.version}" is outdated.'
    raise TypeError(f"Unmapped outcome {type(outcome).__name__}")


def error_response(outcome: CatalogServiceError, profile: CatalogProfile) -> Response:
    """Translate a business outcome into the response sent to the client."""
    status_code = status_for(outcome)
    if isinstance(outcome, ItemInvalid):
        logger.debug("error_response: status=%d messages=%s", status_code, outcome.messages)
        return JSONResponse(status_code=status_code, content=outcome.messages)
    message = _message(outcome, profile)
    logger.debug("error_response: status=%d message=%s", status_code, message)
    return PlainTextResponse(message, status_code=status_code)
