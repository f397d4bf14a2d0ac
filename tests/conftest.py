from __future__ import annotations

import pytest

from property_bot.config import Settings
from property_bot.payloads import OutboundPayload
from property_bot.whatsapp_client import DispatchError, ProviderResponse

ADMIN = "15550000000"


class FakeSender:
    """Records every payload and answers like the Cloud API (or fails for chosen recipients)."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.sent: list[OutboundPayload] = []
        self.fail_for = fail_for or set()
        self.closed = False

    async def send(self, payload: OutboundPayload) -> ProviderResponse:
        self.sent.append(payload)
        if payload.to in self.fail_for:
            raise DispatchError({"error": {"message": "Internal error", "code": 1}}, status_code=500)
        return ProviderResponse(
            messaging_product="whatsapp",
            messages=[{"id": f"wamid.{len(self.sent)}"}],
        )

    async def aclose(self) -> None:
        self.closed = True

    def sent_to(self, recipient: str) -> list[OutboundPayload]:
        return [p for p in self.sent if p.to == recipient]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_version="v21.0",
        phone_number_id="1234567890",
        access_token="test-token",
        admin_waid=ADMIN,
        graph_host="graph.facebook.com",
        port=3000,
        startup_notice="text",
    )


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()
