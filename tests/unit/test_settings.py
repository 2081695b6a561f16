"""Unit tests for catalog/settings.py."""

import logging

import pytest
from pydantic import ValidationError

from catalog.settings import CatalogSettings, configure_logging


def test_default_substring_threshold_is_ten():
    assert CatalogSettings().name_substring_threshold == 10


def test_threshold_read_from_env(monkeypatch):
    monkeypatch.setenv("CATALOG_NAME_SUBSTRING_THRESHOLD", "4")
    assert CatalogSettings().name_substring_threshold == 4


def test_threshold_must_be_positive():
    with pytest.raises(ValidationError):
        CatalogSettings(name_substring_threshold=0)


def test_mail_disabled_by_default():
    assert CatalogSettings().mail_enabled is False


def test_mail_enabled_with_real_host(monkeypatch):
    monkeypatch.setenv("CATALOG_MAIL_HOST", "smtp.acme.com")
    assert CatalogSettings().mail_enabled is True


def test_configure_logging_accepts_lowercase_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging(CatalogSettings(log_level="debug"))
    assert calls[0]["level"] == "DEBUG"
