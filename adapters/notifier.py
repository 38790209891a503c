"""
Alert notification delivery.

``ResendEmailNotifier`` posts one summary email per tenant through the Resend
HTTP API. ``LogNotifier`` only logs the summary and is used whenever no API
key is configured (local development, tests).
"""

from abc import ABC, abstractmethod
import logging
from pathlib import Path
from typing import Optional

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.exceptions import NotificationError
from domain.schemas.notification_schemas import AlertNotification

logger = logging.getLogger("reglement.notifier")


TEMPLATES_DIR = Path(__file__).parent / "templates"

# Autoescape applies to the .html body only; the text body stays verbatim
_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(enabled_extensions=("html",)),
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_subject(notification: AlertNotification) -> str:
    plural = "s" if notification.count > 1 else ""
    return (
        f"⚠️ {notification.count} new regulatory alert{plural} "
        f"for {notification.display_name}"
    )


def _context(notification: AlertNotification, dashboard_url: str) -> dict:
    return {
        "display_name": notification.display_name,
        "alerts": notification.alerts,
        "dashboard_url": dashboard_url,
    }


def render_html(notification: AlertNotification, dashboard_url: str) -> str:
    template = _env.get_template("alert_summary.html")
    return template.render(_context(notification, dashboard_url))


def render_text(notification: AlertNotification, dashboard_url: str) -> str:
    template = _env.get_template("alert_summary.txt")
    return template.render(_context(notification, dashboard_url))


class Notifier(ABC):
    @abstractmethod
    async def send(self, notification: AlertNotification) -> None:
        """Deliver the summary or raise NotificationError"""


class LogNotifier(Notifier):
    """Writes the summary to the log instead of sending it"""

    async def send(self, notification: AlertNotification) -> None:
        logger.info(
            "Notification for %s: %s",
            notification.recipient,
            build_subject(notification),
        )
        for item in notification.alerts:
            logger.info(
                "  %s -> %s [%s]",
                item.ingredient_name,
                item.substance_name,
                item.source_id.value,
            )


class ResendEmailNotifier(Notifier):
    def __init__(
        self,
        api_key: str,
        sender: str,
        site_url: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.sender = sender
        self.api_url = api_url
        self.timeout = timeout
        self.dashboard_url = f"{site_url.rstrip('/')}/dashboard"
        self._client = client

    def build_payload(self, notification: AlertNotification) -> dict:
        return {
            "from": self.sender,
            "to": [notification.recipient],
            "subject": build_subject(notification),
            "html": render_html(notification, self.dashboard_url),
            "text": render_text(notification, self.dashboard_url),
        }

    async def _post(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            self.api_url,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )

    async def send(self, notification: AlertNotification) -> None:
        payload = self.build_payload(notification)
        try:
            if self._client is not None:
                response = await self._post(self._client, payload)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, payload)
        except httpx.HTTPError as exc:
            raise NotificationError(
                f"Email request failed: {exc}", recipient=notification.recipient
            ) from exc

        if response.status_code >= 300:
            raise NotificationError(
                f"Email API responded {response.status_code}: {response.text[:200]}",
                recipient=notification.recipient,
                status_code=response.status_code,
            )
        logger.info(
            "Sent %d alert(s) to %s", notification.count, notification.recipient
        )


def build_notifier(settings) -> Notifier:
    if settings.resend_api_key:
        return ResendEmailNotifier(
            api_key=settings.resend_api_key,
            sender=settings.email_from,
            site_url=settings.site_url,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout_seconds,
        )
    logger.warning("RESEND_API_KEY not set, alert summaries will only be logged")
    return LogNotifier()
