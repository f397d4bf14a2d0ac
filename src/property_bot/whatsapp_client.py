from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from .config import Settings
from .payloads import OutboundPayload, to_json

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """
    A send to the Cloud API failed.

    status_code is None for transport failures (DNS, connection reset, ...);
    detail is the provider's error body when there is one, else the transport message.
    """

    def __init__(self, detail: Any, status_code: int | None = None) -> None:
        super().__init__(f"WhatsApp send failed ({status_code or 'transport'}): {detail}")
        self.detail = detail
        self.status_code = status_code


class ProviderMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str


class ProviderResponse(BaseModel):
    """Decoded 2xx body of POST /messages. Unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    messaging_product: str | None = None
    messages: list[ProviderMessage] = []
    # body text of a 2xx that was not the usual JSON
    raw: str | None = None

    @property
    def message_id(self) -> str | None:
        return self.messages[0].id if self.messages else None


class WhatsAppClient:
    """
    Thin sender for the WhatsApp Cloud API /messages endpoint.

    One POST per call. No retries, no batching. Pass `http_client` to share a
    connection pool (or a mock transport); otherwise the client owns its own.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.access_token}",
            "Content-Type": "application/json",
        }

    async def send(self, payload: OutboundPayload) -> ProviderResponse:
        try:
            response = await self._http.post(
                self.settings.messages_url,
                json=to_json(payload),
                headers=self.headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL (bad GRAPH_API_HOST/VERSION/PHONE_NUMBER_ID) is not an HTTPError
            logger.error("Transport error sending %s to %s: %s", payload.type, payload.to, e)
            raise DispatchError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            detail = _error_detail(response)
            logger.error(
                "WhatsApp API error %s sending %s to %s: %s",
                response.status_code,
                payload.type,
                payload.to,
                detail,
            )
            raise DispatchError(detail, status_code=response.status_code)

        try:
            result = ProviderResponse.model_validate(response.json())
        except ValueError:
            # 2xx means the provider accepted it; an odd body only costs us the message id
            logger.warning("Unexpected 2xx body sending to %s: %s", payload.to, response.text)
            result = ProviderResponse(raw=response.text)

        logger.info("Message sent to %s (id=%s)", payload.to, result.message_id)
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()


def _error_detail(response: httpx.Response) -> Any:
    # Graph API errors are JSON ({"error": {...}}); proxies may answer with HTML/text
    try:
        return response.json()
    except ValueError:
        return response.text
