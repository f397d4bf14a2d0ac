from __future__ import annotations

import argparse
import json

from property_bot.payloads import (
    OutboundPayload,
    compose_button_menu,
    compose_list_menu,
    compose_text,
    to_json,
)


def build_payload(kind: str, recipient: str, text: str) -> OutboundPayload:
    if kind == "buttons":
        return compose_button_menu(recipient)
    if kind == "list":
        return compose_list_menu(recipient)
    return compose_text(recipient, text)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print the JSON body that would be POSTed to the Cloud API /messages endpoint."
    )
    parser.add_argument("kind", choices=["text", "buttons", "list"])
    parser.add_argument("recipient", type=str)
    parser.add_argument(
        "--text",
        type=str,
        default="Hello from FY'S PROPERTY",
        help="Body for 'text' payloads (ignored for menus).",
    )
    args = parser.parse_args()

    payload = build_payload(args.kind, args.recipient, args.text)
    print(json.dumps(to_json(payload), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
