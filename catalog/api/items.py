"""REST endpoints for catalog items, one router per profile.

Versions travel as strong entity tags: GET returns ETag: "<version>",
PUT expects the same value in If-Match and answers with the new ETag.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Header, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.items import CatalogItem, ItemFilter
from catalog.domain.models.profiles import CatalogProfile
from catalog.domain.services.items import ItemService
from catalog.domain.services.versioning import format_etag, strip_etag
from catalog.infrastructure.database import get_session
from catalog.infrastructure.mail import build_notifier
from catalog.infrastructure.persistence.repositories import Repositories, get_repositories
from catalog.settings import CatalogSettings

from .errors import error_response

logger = logging.getLogger(__name__)


async def provide_repositories(session: AsyncSession = Depends(get_session)) -> Repositories:
    return get_repositories(session)


def get_settings(request: Request) -> CatalogSettings:
    return request.app.state.settings


def _collection_uri(request: Request, prefix: str) -> str:
    return f"{str(request.base_url).rstrip('/')}{prefix}"


def _to_hal(item: CatalogItem, collection: str) -> dict[str, Any]:
    body = jsonable_encoder(item.attributes())
    self_href = f"{collection}/{item.id}"
    body["_links"] = {
        "self": {"href": self_href},
        "list": {"href": collection},
        "add": {"href": collection},
        "update": {"href": self_href},
        "remove": {"href": self_href},
    }
    return body


def build_router(profile: CatalogProfile) -> APIRouter:
    """Create the /<profile>s router bound to profile."""
    prefix = f"/{profile.key}s"
    router = APIRouter(prefix=prefix, tags=[profile.label])

    def get_service(
        repositories: Repositories = Depends(provide_repositories),
        settings: CatalogSettings = Depends(get_settings),
    ) -> ItemService:
        return ItemService(
            repositories.for_profile(profile.key),
            profile,
            settings,
            build_notifier(settings, profile.label),
        )

    @router.get("/{item_id}")
    async def find_by_id(
        item_id: str,
        request: Request,
        if_none_match: str | None = Header(default=None),
        service: ItemService = Depends(get_service),
    ) -> Response:
        item = await service.find_by_id(item_id)
        if item is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        etag = format_etag(item.version)
        if if_none_match is not None and strip_etag(if_none_match) == str(item.version):
            return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag})

        body = _to_hal(item, _collection_uri(request, prefix))
        return JSONResponse(content=body, headers={"ETag": etag})

    @router.get("")
    async def find(
        request: Request,
        name: str | None = None,
        category: str | None = None,
        vendor: str | None = None,
        rating: float | None = None,
        available: bool | None = None,
        tag: list[str] = Query(default=[]),
        service: ItemService = Depends(get_service),
    ) -> Response:
        criteria = ItemFilter(
            name=name,
            category=category,
            vendor=vendor,
            rating=rating,
            available=available,
            tags=tag,
        )
        items = await service.find(criteria)
        if not items:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        collection = _collection_uri(request, prefix)
        body = []
        for item in items:
            entry = jsonable_encoder(item.attributes())
            entry["_links"] = {"self": {"href": f"{collection}/{item.id}"}}
            body.append(entry)
        return JSONResponse(content=body)

    @router.post("")
    async def create(
        request: Request,
        draft: dict[str, Any] = Body(...),
        service: ItemService = Depends(get_service),
    ) -> Response:
        result = await service.create(draft)
        if not isinstance(result, str):
            return error_response(result, profile)

        location = f"{_collection_uri(request, prefix)}/{result}"
        logger.debug("create: location=%s", location)
        return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})

    @router.put("/{item_id}")
    async def update(
        item_id: str,
        candidate: dict[str, Any] = Body(...),
        if_match: str | None = Header(default=None),
        service: ItemService = Depends(get_service),
    ) -> Response:
        token = strip_etag(if_match) if if_match is not None else None
        result = await service.update({**candidate, "id": item_id}, token)
        if not isinstance(result, int):
            return error_response(result, profile)

        return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"ETag": format_etag(result)})

    @router.delete("/{item_id}")
    async def delete(
        item_id: str,
        service: ItemService = Depends(get_service),
    ) -> Response:
        await service.delete(item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
