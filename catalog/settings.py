"""Service-level settings and logging setup.

Database settings live next to the engine in catalog/infrastructure/database.py;
everything the service, notifier and API need is read here from CATALOG_*
environment variables (or a .env file).  The resulting object is passed
explicitly to the components that need it.
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CATALOG_", env_file=".env", extra="ignore")

    # Name filters shorter than this are matched as case-insensitive substrings.
    name_substring_threshold: int = Field(default=10, ge=1)

    # mail_host "skip" disables notifications entirely.
    mail_host: str = "skip"
    mail_port: int = 25
    mail_sender: str = "Joe Doe <joe.doe@acme.com>"
    mail_recipient: str = "Foo Bar <foo.bar@acme.com>"
    mail_timeout: float = 10.0

    log_level: str = "INFO"

    @property
    def mail_enabled(self) -> bool:
        return self.mail_host != "skip"


def configure_logging(settings: CatalogSettings) -> None:
    """Install a root handler at the configured level (idempotent)."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
