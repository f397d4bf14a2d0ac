from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from .config import Settings
from .inbound import InboundMessage
from .menu import MenuReply, resolve_reply
from .payloads import OutboundPayload, compose_text
from .whatsapp_client import DispatchError, ProviderResponse

logger = logging.getLogger(__name__)


class MessageSender(Protocol):
    async def send(self, payload: OutboundPayload) -> ProviderResponse: ...


@dataclass
class RouterResult:
    reply: MenuReply
    reply_response: ProviderResponse
    forward_response: ProviderResponse


def forward_text(message: InboundMessage) -> str:
    return f'User {message.sender} sent: "{message.text}"'


async def handle_inbound(
    message: InboundMessage,
    client: MessageSender,
    settings: Settings,
) -> RouterResult:
    """
    Core business logic for one inbound customer message:
    - resolve the menu reply from the latest text only
    - reply to the customer
    - forward the raw text to the admin (every message, whatever option matched)

    Both sends run concurrently and are both awaited. If either fails, the
    whole message counts as failed and DispatchError is raised; no retry.
    """
    logger.info("Received message from %s: %s", message.sender, message.text)

    reply = resolve_reply(message.text)
    if reply.notify_admin:
        logger.info("Customer %s asked to talk to an agent", message.sender)

    admin = settings.admin_waid or ""
    legs = ("reply", "forward")
    results = await asyncio.gather(
        client.send(compose_text(message.sender, reply.text)),
        client.send(compose_text(admin, forward_text(message))),
        return_exceptions=True,
    )

    failures: list[DispatchError] = []
    for leg, result in zip(legs, results):
        if isinstance(result, DispatchError):
            logger.error("Failed to send %s for message from %s: %s", leg, message.sender, result)
            failures.append(result)
        elif isinstance(result, BaseException):
            # anything else is a bug, not a delivery failure
            raise result

    if failures:
        raise failures[0]

    reply_response, forward_response = results
    logger.info("Replied to %s (%s) and forwarded to admin", message.sender, reply.option.name)
    return RouterResult(
        reply=reply,
        reply_response=reply_response,  # type: ignore[arg-type]
        forward_response=forward_response,  # type: ignore[arg-type]
    )
