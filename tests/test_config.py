from __future__ import annotations

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from property_bot.config import ConfigError, Settings, get_settings

ENV = {
    "VERSION": "v21.0",
    "PHONE_NUMBER_ID": "1234567890",
    "ACCESS_TOKEN": "secret",
    "ADMIN_WAID": "15550000000",
}


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for name in (*ENV, "PORT", "HOST", "GRAPH_API_HOST", "STARTUP_NOTICE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_settings_read_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    for name, value in ENV.items():
        clean_env.setenv(name, value)
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("STARTUP_NOTICE", "LIST")

    settings = get_settings().require()

    assert settings.port == 8080
    assert settings.startup_notice == "list"
    assert settings.admin_waid == "15550000000"
    assert settings.messages_url == "https://graph.facebook.com/v21.0/1234567890/messages"


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings()
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.startup_notice == "text"
    assert settings.log_level == "INFO"


def test_missing_required_values_are_fatal(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VERSION", "v21.0")
    clean_env.setenv("ACCESS_TOKEN", "")

    settings = Settings()
    assert settings.missing() == ["PHONE_NUMBER_ID", "ACCESS_TOKEN", "ADMIN_WAID"]
    with pytest.raises(ConfigError, match="PHONE_NUMBER_ID, ACCESS_TOKEN, ADMIN_WAID"):
        settings.require()


def test_unknown_startup_notice_is_rejected(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("STARTUP_NOTICE", "carousel")
    with pytest.raises(ValidationError):
        Settings()
