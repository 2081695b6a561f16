"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from catalog.domain.models.profiles import PROFILES
from catalog.settings import CatalogSettings, configure_logging

from .items import build_router


def create_app(settings: CatalogSettings | None = None) -> FastAPI:
    """Build the catalog API with one router per profile (/books, /cars)."""
    settings = settings or CatalogSettings()
    configure_logging(settings)

    app = FastAPI(title="Catalog")
    app.state.settings = settings
    for profile in PROFILES.values():
        app.include_router(build_router(profile))
    return app
