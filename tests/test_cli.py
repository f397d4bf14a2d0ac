from __future__ import annotations

import json
from collections.abc import Iterator

import pytest

from property_bot import cli, debug
from property_bot.menu import FALLBACK_TEXT, LISTINGS_TEXT


def test_chat_prints_resolved_replies(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    lines: Iterator[str] = iter(["1", "what?", "4", "/quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    cli.chat()

    out = capsys.readouterr().out
    assert f"bot [listings]> {LISTINGS_TEXT}" in out
    assert f"bot [fallback]> {FALLBACK_TEXT}" in out
    assert "[forwarded to admin as agent request]" in out


def test_preview_prints_cloud_api_json(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.argv", ["property-bot-preview", "buttons", "15551234567"])

    debug.main()

    data = json.loads(capsys.readouterr().out)
    assert data["to"] == "15551234567"
    assert data["interactive"]["type"] == "button"


def test_preview_text_uses_given_body() -> None:
    payload = debug.build_payload("text", "15551234567", "Hi there")
    assert payload.text.body == "Hi there"  # type: ignore[union-attr]
