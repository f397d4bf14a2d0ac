from __future__ import annotations

from .menu import resolve_reply


def chat() -> None:
    """
    Interactive CLI preview of the menu replies.

    Runs the resolver only: nothing is sent to WhatsApp or to the admin.
    """
    print("Menu preview (no messages are sent). Type /quit to exit.\n")
    while True:
        try:
            user_input = input("you> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if user_input.strip().lower() in {"/q", "/quit", "/exit"}:
            break
        reply = resolve_reply(user_input)
        suffix = "  [forwarded to admin as agent request]" if reply.notify_admin else ""
        print(f"bot [{reply.option.name.lower()}]> {reply.text}{suffix}\n")


def main() -> None:
    chat()


if __name__ == "__main__":
    main()
