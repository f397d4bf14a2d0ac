from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field

StartupNotice = Literal["text", "buttons", "list"]

REQUIRED_ENV: dict[str, str] = {
    "api_version": "VERSION",
    "phone_number_id": "PHONE_NUMBER_ID",
    "access_token": "ACCESS_TOKEN",
    "admin_waid": "ADMIN_WAID",
}


class ConfigError(RuntimeError):
    """Raised at startup when required environment variables are missing."""


class Settings(BaseModel):
    # --- WhatsApp Cloud API (all required) ---
    api_version: str | None = Field(default_factory=lambda: os.getenv("VERSION"))
    phone_number_id: str | None = Field(default_factory=lambda: os.getenv("PHONE_NUMBER_ID"))
    access_token: str | None = Field(default_factory=lambda: os.getenv("ACCESS_TOKEN"))

    # WhatsApp id of the admin who receives every customer message
    admin_waid: str | None = Field(default_factory=lambda: os.getenv("ADMIN_WAID"))

    # Override only for a proxy or a sandbox; the real API lives at graph.facebook.com
    graph_host: str = Field(
        default_factory=lambda: os.getenv("GRAPH_API_HOST", "graph.facebook.com")
    )

    # --- Server ---
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # What the admin gets when the process boots: plain alert or an interactive menu
    startup_notice: StartupNotice = Field(
        default_factory=lambda: os.getenv("STARTUP_NOTICE", "text").lower()  # type: ignore[return-value]
    )

    model_config = {"frozen": True, "validate_default": True}

    @property
    def messages_url(self) -> str:
        return f"https://{self.graph_host}/{self.api_version}/{self.phone_number_id}/messages"

    def missing(self) -> list[str]:
        """Names of the required environment variables that are unset or empty."""
        return [env for field, env in REQUIRED_ENV.items() if not getattr(self, field)]

    def require(self) -> Settings:
        """
        Fail fast when the WhatsApp credentials or the admin number are absent.

        Called once at startup; request handlers never see a half-configured process.
        """
        missing = self.missing()
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
