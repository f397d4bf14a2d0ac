from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final


class MenuOption(str, Enum):
    MENU = "menu"
    LISTINGS = "1"
    BUY = "2"
    SELL = "3"
    AGENT = "4"
    FAQS = "5"
    FALLBACK = "fallback"


MENU_TEXT: Final[str] = (
    "Welcome to FY'S PROPERTY! Reply with a number:\n"
    "1. View property listings\n"
    "2. Buy a property\n"
    "3. Sell a property\n"
    "4. Talk to an agent\n"
    "5. FAQs"
)

LISTINGS_TEXT: Final[str] = (
    "Our latest listings are published at fysproperty.com/listings. "
    "Reply with the reference number of any property for more details."
)

BUY_TEXT: Final[str] = (
    "To buy a property, send us your preferred area, budget and number of bedrooms. "
    "An agent will shortlist matching properties and arrange viewings with you."
)

SELL_TEXT: Final[str] = (
    "To sell your property, send us its location, size, asking price and a few photos. "
    "We will arrange a free valuation and get it listed."
)

AGENT_TEXT: Final[str] = (
    "Your message has been forwarded to our admin. "
    "One of our agents will get back to you shortly."
)

FAQS_TEXT: Final[str] = (
    "FAQs:\n"
    "- Office hours: Mon-Sat, 9am-6pm.\n"
    "- Viewings are free and booked through an agent.\n"
    "- Our commission is agreed in writing before listing.\n"
    "Type 'menu' to see all options."
)

FALLBACK_TEXT: Final[str] = "Sorry, I didn't understand that. Type 'menu' to see options."

REPLIES: Final = MappingProxyType(
    {
        MenuOption.MENU: MENU_TEXT,
        MenuOption.LISTINGS: LISTINGS_TEXT,
        MenuOption.BUY: BUY_TEXT,
        MenuOption.SELL: SELL_TEXT,
        MenuOption.AGENT: AGENT_TEXT,
        MenuOption.FAQS: FAQS_TEXT,
        MenuOption.FALLBACK: FALLBACK_TEXT,
    }
)

# normalised keyword -> option; exact matches only
KEYWORDS: Final = MappingProxyType(
    {
        "menu": MenuOption.MENU,
        "start": MenuOption.MENU,
        "1": MenuOption.LISTINGS,
        "2": MenuOption.BUY,
        "3": MenuOption.SELL,
        "4": MenuOption.AGENT,
        "5": MenuOption.FAQS,
        "faqs": MenuOption.FAQS,
    }
)


@dataclass(frozen=True)
class MenuReply:
    option: MenuOption
    text: str
    # the customer explicitly asked for a human
    notify_admin: bool = False


def normalise(text: str) -> str:
    return text.strip().lower()


def classify(text: str) -> MenuOption:
    return KEYWORDS.get(normalise(text), MenuOption.FALLBACK)


def resolve_reply(text: str) -> MenuReply:
    """
    Map the latest inbound text to a fixed reply.

    Stateless: the same text always yields the same reply, whatever was said before.
    """
    option = classify(text)
    return MenuReply(
        option=option,
        text=REPLIES[option],
        notify_admin=option is MenuOption.AGENT,
    )
