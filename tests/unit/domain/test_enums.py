"""Tests for catalog/domain/models/enums.py."""

from catalog.domain.models.enums import NameMatch, UniqueField


def test_unique_field_values_are_attribute_names():
    assert UniqueField.NAME == "name"
    assert UniqueField.SERIAL == "serial"


def test_unique_field_has_two_members():
    assert len(UniqueField) == 2


def test_name_match_round_trips_from_string():
    assert NameMatch("substring") is NameMatch.SUBSTRING
    assert NameMatch("exact") is NameMatch.EXACT
