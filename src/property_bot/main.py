from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from . import __version__
from .config import Settings, get_settings
from .inbound import InvalidPayload, parse_inbound
from .notifier import notify_admin_startup
from .pipeline import MessageSender, handle_inbound
from .whatsapp_client import DispatchError, WhatsAppClient

logger = logging.getLogger(__name__)

ROOT_TEXT = "FY'S PROPERTY WhatsApp Bot is running."

# how long shutdown waits for a still-running startup alert
NOTICE_GRACE_SECONDS = 2.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: missing credentials stop the process here, before any request is served
    settings = get_settings().require()
    client = WhatsAppClient(settings)
    app.state.whatsapp_client = client

    # The admin alert runs in the background; a slow or failed send never blocks startup.
    # It is scheduled when startup completes, which uvicorn follows by binding the socket;
    # if that bind fails the admin may already have been told the bot is live.
    notice = asyncio.create_task(notify_admin_startup(client, settings))
    app.state.startup_notice = notice
    yield

    # Shutdown: give the alert a short grace period (it never raises), then release the pool
    await asyncio.wait({notice}, timeout=NOTICE_GRACE_SECONDS)
    if not notice.done():
        logger.warning("Admin alert still pending at shutdown; cancelling it")
        notice.cancel()
        with suppress(asyncio.CancelledError):
            await notice
    await client.aclose()


app = FastAPI(title="property-bot", version=__version__, lifespan=lifespan)


# --- Dependencies ---


def get_whatsapp_client(request: Request) -> MessageSender:
    return request.app.state.whatsapp_client


# --- Routes ---


@app.get("/")
def root() -> PlainTextResponse:
    """Liveness probe."""
    return PlainTextResponse(ROOT_TEXT)


@app.post("/webhook")
async def webhook(
    request: Request,
    client: MessageSender = Depends(get_whatsapp_client),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Relay webhook: { "from": "<sender_number>", "message": "<user_message>" }.

    Behaviour:
      - 400 if 'from' or 'message' is missing/empty (nothing is sent)
      - reply to the customer and forward the message to the admin
      - 200 once both sends succeeded, 500 if either failed
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    try:
        message = parse_inbound(body)
    except InvalidPayload as e:
        logger.error("%s Body: %r", e.detail, body)
        return PlainTextResponse(e.detail, status_code=400)

    try:
        await handle_inbound(message, client, settings)
    except DispatchError as e:
        # provider detail stays in the logs; the caller only sees the status
        logger.error("Error in /webhook for %s: %s", message.sender, e.detail)
        return PlainTextResponse("Internal Server Error", status_code=500)

    return PlainTextResponse("OK")


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings.require()
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
