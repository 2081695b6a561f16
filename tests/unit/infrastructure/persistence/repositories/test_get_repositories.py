"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

import pytest

from catalog.infrastructure.persistence.repositories import (
    Repositories,
    SqlItemRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_books_is_correct_type():
    assert isinstance(_repos().books, SqlItemRepository)


def test_repositories_cars_is_correct_type():
    assert isinstance(_repos().cars, SqlItemRepository)


def test_repositories_are_bound_to_their_profile():
    repos = _repos()
    assert repos.books.profile_key == "book"
    assert repos.cars.profile_key == "car"


def test_for_profile_selects_repository():
    repos = _repos()
    assert repos.for_profile("car") is repos.cars


def test_for_unknown_profile_raises():
    with pytest.raises(KeyError):
        _repos().for_profile("boat")


def test_repositories_dataclass_has_two_fields():
    assert len(Repositories.__dataclass_fields__) == 2
