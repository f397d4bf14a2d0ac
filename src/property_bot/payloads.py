from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# WhatsApp Cloud API limits for interactive messages
MAX_BUTTONS: Final[int] = 3
MAX_LIST_ROWS: Final[int] = 10


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Text ---


class TextBody(_Frozen):
    body: str


class TextPayload(_Frozen):
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    to: str
    type: Literal["text"] = "text"
    text: TextBody


# --- Interactive: reply buttons ---


class Reply(_Frozen):
    id: str
    title: str  # max 20 chars on the provider side


class ReplyButton(_Frozen):
    type: Literal["reply"] = "reply"
    reply: Reply


class ButtonAction(_Frozen):
    buttons: tuple[ReplyButton, ...] = Field(min_length=1, max_length=MAX_BUTTONS)


class BodyText(_Frozen):
    text: str


class ButtonInteractive(_Frozen):
    type: Literal["button"] = "button"
    body: BodyText
    action: ButtonAction


class ButtonPayload(_Frozen):
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    to: str
    type: Literal["interactive"] = "interactive"
    interactive: ButtonInteractive


# --- Interactive: list ---


class ListRow(_Frozen):
    id: str
    title: str  # max 24 chars on the provider side


class ListSection(_Frozen):
    title: str
    rows: tuple[ListRow, ...] = Field(min_length=1)


class ListHeader(_Frozen):
    type: Literal["text"] = "text"
    text: str


class ListAction(_Frozen):
    button: str
    sections: tuple[ListSection, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_row_count(self) -> ListAction:
        total = sum(len(s.rows) for s in self.sections)
        if total > MAX_LIST_ROWS:
            raise ValueError(f"list messages carry at most {MAX_LIST_ROWS} rows, got {total}")
        return self


class ListInteractive(_Frozen):
    type: Literal["list"] = "list"
    header: ListHeader
    body: BodyText
    footer: BodyText
    action: ListAction


class ListPayload(_Frozen):
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    to: str
    type: Literal["interactive"] = "interactive"
    interactive: ListInteractive


OutboundPayload = TextPayload | ButtonPayload | ListPayload


# --- Fixed menu content ---

MENU_BODY: Final[str] = "Welcome to FY'S PROPERTY. How can we help you today?"

MENU_BUTTONS: Final[tuple[tuple[str, str], ...]] = (
    ("option1", "View Listings"),
    ("option2", "Buy Property"),
    ("option3", "Sell Property"),
)

LIST_HEADER: Final[str] = "FY'S PROPERTY"
LIST_FOOTER: Final[str] = "Type 'menu' at any time to see this again."
LIST_BUTTON: Final[str] = "View options"
LIST_SECTION_TITLE: Final[str] = "Services"
LIST_ROWS: Final[tuple[tuple[str, str], ...]] = (
    ("option1", "Property Listings"),
    ("option2", "Buy a Property"),
    ("option3", "Sell a Property"),
    ("option4", "Talk to an Agent"),
    ("option5", "FAQs"),
)


# --- Composers ---


def compose_text(recipient: str, text: str) -> TextPayload:
    return TextPayload(to=recipient, text=TextBody(body=text))


def compose_button_menu(recipient: str) -> ButtonPayload:
    """Interactive reply-button menu. The provider caps these at 3 buttons."""
    buttons = tuple(
        ReplyButton(reply=Reply(id=button_id, title=title)) for button_id, title in MENU_BUTTONS
    )
    return ButtonPayload(
        to=recipient,
        interactive=ButtonInteractive(
            body=BodyText(text=MENU_BODY),
            action=ButtonAction(buttons=buttons),
        ),
    )


def compose_list_menu(recipient: str) -> ListPayload:
    """
    Interactive list menu with all five options.

    Needed whenever more than 3 choices must fit in one interactive message.
    """
    rows = tuple(ListRow(id=row_id, title=title) for row_id, title in LIST_ROWS)
    return ListPayload(
        to=recipient,
        interactive=ListInteractive(
            header=ListHeader(text=LIST_HEADER),
            body=BodyText(text=MENU_BODY),
            footer=BodyText(text=LIST_FOOTER),
            action=ListAction(
                button=LIST_BUTTON,
                sections=(ListSection(title=LIST_SECTION_TITLE, rows=rows),),
            ),
        ),
    )


def to_json(payload: OutboundPayload) -> dict[str, Any]:
    """JSON body exactly as the Cloud API /messages endpoint expects it."""
    return payload.model_dump(mode="json")
