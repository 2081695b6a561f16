"""SMTP notifier announcing newly created catalog items."""

from __future__ import annotations

import asyncio
import html
import logging
import smtplib
from email.message import EmailMessage

from catalog.domain.models.items import CatalogItem
from catalog.domain.services.notification import NotificationError, Notifier, NullNotifier
from catalog.settings import CatalogSettings

logger = logging.getLogger(__name__)


class SmtpNotifier(Notifier):
    """Sends one HTML mail per created item through a plain SMTP relay.

    smtplib is blocking, so delivery runs in a worker thread.
    """

    def __init__(self, settings: CatalogSettings, label: str = "Item") -> None:
        self._settings = settings
        self._label = label

    def build_message(self, item: CatalogItem) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._settings.mail_sender
        message["To"] = self._settings.mail_recipient
        message["Subject"] = f"New {self._label.lower()} {item.id}"
        message.set_content(f"The {self._label.lower()} {item.name!r} has been created.")
        message.add_alternative(
            f"<p>The {self._label.lower()} <strong>{html.escape(item.name)}</strong> "
            "has been created.</p>",
            subtype="html",
        )
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            self._settings.mail_host,
            self._settings.mail_port,
            timeout=self._settings.mail_timeout,
        ) as smtp:
            smtp.send_message(message)

    async def send(self, item: CatalogItem) -> None:
        message = self.build_message(item)
        logger.debug("send: subject=%s", message["Subject"])
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"could not deliver mail for {item.id}") from exc


def build_notifier(settings: CatalogSettings, label: str = "Item") -> Notifier:
    """Return an SMTP notifier, or a NullNotifier when mail_host is "skip"."""
    if not settings.mail_enabled:
        return NullNotifier()
    return SmtpNotifier(settings, label)
