"""ORM model registry: imports every mapper class so it is registered with
Base.metadata before Alembic or SQLAlchemy runs.
"""

from catalog.infrastructure.persistence.models.items import CatalogItem

__all__ = [
    "CatalogItem",
]
