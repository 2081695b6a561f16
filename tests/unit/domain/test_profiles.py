"""Tests for catalog/domain/models/profiles.py."""

import pytest
from pydantic import ValidationError

from catalog.domain.models.profiles import BOOK_PROFILE, CAR_PROFILE, MAX_RATING, PROFILES


def test_profiles_keyed_by_profile_key():
    assert PROFILES == {"book": BOOK_PROFILE, "car": CAR_PROFILE}


def test_max_rating_is_five():
    assert MAX_RATING == 5


def test_book_categories():
    assert BOOK_PROFILE.categories == {"PRINT", "KINDLE"}


def test_car_vendors():
    assert CAR_PROFILE.vendors == {"FOO_MANUFACTURER", "BAR_MANUFACTURER"}


def test_profile_is_frozen():
    with pytest.raises(ValidationError):
        BOOK_PROFILE.key = "other"


# --- ISBN ---

@pytest.mark.parametrize(
    "isbn",
    ["0-0070-0644-6", "978-3-89722-583-1", "0007006446", "ISBN 0-0070-0644-6"],
)
def test_book_accepts_isbn(isbn):
    assert BOOK_PROFILE.serial_matches(isbn)


@pytest.mark.parametrize("isbn", ["falsche-ISBN", "123", ""])
def test_book_rejects_non_isbn(isbn):
    assert not BOOK_PROFILE.serial_matches(isbn)


# --- VIN ---

def test_car_accepts_vin():
    assert CAR_PROFILE.serial_matches("1HGCM82633A004352")


@pytest.mark.parametrize("vin", ["1HGCM82633A00435", "1HGCM82633A00435O", "0-0070-0644-6"])
def test_car_rejects_non_vin(vin):
    assert not CAR_PROFILE.serial_matches(vin)
