"""
Central configuration via pydantic-settings.
All values are read once from environment variables / .env file.
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Telegram ──────────────────────────────────────────────────────────────
    BOT_TOKEN: str

    # ── Registration Service ──────────────────────────────────────────────────
    BACKEND_URL: str = "http://localhost:8000"

    # ── Logging ───────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ─────────────────────────────────────────────────────────────────────────

    @property
    def api_base(self) -> str:
        """Backend URL without a trailing slash, ready for path joins."""
        return self.BACKEND_URL.rstrip("/")


settings = Settings()
