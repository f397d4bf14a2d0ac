from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

INVALID_PAYLOAD_DETAIL = "Invalid payload. Must include 'from' and 'message'."


class InvalidPayload(ValueError):
    """The webhook body is missing 'from' or 'message' (or is not a JSON object)."""

    def __init__(self, detail: str = INVALID_PAYLOAD_DETAIL) -> None:
        super().__init__(detail)
        self.detail = detail


class InboundMessage(BaseModel):
    """
    Simplified relay event: { "from": "<sender_number>", "message": "<user_message>" }.

    `from` is a Python keyword, so the field is exposed as `sender`.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sender: str = Field(alias="from", min_length=1)
    text: str = Field(alias="message", min_length=1)


def parse_inbound(body: Any) -> InboundMessage:
    """
    Validate a decoded webhook body.

    Raises InvalidPayload for anything that is not an object with non-empty
    string 'from' and 'message'. Whitespace is kept: the admin gets the raw text.
    """
    if not isinstance(body, dict):
        raise InvalidPayload()

    try:
        return InboundMessage.model_validate(body)
    except ValidationError as e:
        raise InvalidPayload() from e
