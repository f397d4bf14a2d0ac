from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import Settings
from .payloads import OutboundPayload, compose_button_menu, compose_list_menu, compose_text
from .pipeline import MessageSender
from .whatsapp_client import DispatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartupNotifyResult:
    delivered: bool
    message_id: str | None = None
    error: DispatchError | None = None


def startup_payload(settings: Settings) -> OutboundPayload:
    admin = settings.admin_waid or ""
    if settings.startup_notice == "buttons":
        return compose_button_menu(admin)
    if settings.startup_notice == "list":
        return compose_list_menu(admin)
    return compose_text(admin, f"FY'S PROPERTY Bot is LIVE on port {settings.port}.")


async def notify_admin_startup(client: MessageSender, settings: Settings) -> StartupNotifyResult:
    """
    Tell the admin the bot is up. Best effort: never raises, never retries.

    The outcome is returned (and logged) so the caller can inspect it.
    """
    try:
        response = await client.send(startup_payload(settings))
    except DispatchError as e:
        logger.error("Failed to send admin alert: %s", e)
        return StartupNotifyResult(delivered=False, error=e)

    logger.info("Admin alert sent successfully (id=%s).", response.message_id)
    return StartupNotifyResult(delivered=True, message_id=response.message_id)
