"""Tests for catalog/domain/models/__init__.py: package exports."""

from catalog.domain.models import __all__ as domain_all
from catalog.domain.models import (
    # spot-check one import from each module
    BOOK_PROFILE,
    CatalogItem,
    ItemInvalid,
    UniqueField,
)


def test_domain_models_exports_18_names():
    assert len(domain_all) == 18


def test_unique_field_importable_from_package():
    assert UniqueField.NAME == "name"


def test_catalog_item_importable_from_package():
    assert CatalogItem.__name__ == "CatalogItem"


def test_book_profile_importable_from_package():
    assert BOOK_PROFILE.key == "book"


def test_item_invalid_importable_from_package():
    assert ItemInvalid.__name__ == "ItemInvalid"
