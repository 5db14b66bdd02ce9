"""gauth settings — loaded from environment variables via .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gauth.core.constants import HTTP_TIMEOUT


class Settings(BaseSettings):
    """Embedding-application configuration for the Google client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Environment ──────────────────────────────────────────────
    gauth_env: Literal["dev", "prod"] = "dev"
    log_level: str = "INFO"

    # ── OAuth ────────────────────────────────────────────────────
    google_client_id: str = ""
    google_client_secret: SecretStr = SecretStr("")
    google_redirect_url: str = "http://localhost:3000/api/auth/callback/google"

    # ── HTTP ─────────────────────────────────────────────────────
    oauth_http_timeout: float = HTTP_TIMEOUT

    @model_validator(mode="after")
    def _check_prod_credentials(self) -> "Settings":
        """Refuse to start in production without Google credentials."""
        if self.gauth_env == "prod":
            if not self.google_client_id or not self.google_client_secret.get_secret_value():
                msg = (
                    "GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET must be set "
                    "in production."
                )
                raise ValueError(msg)
        return self


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Singleton settings loader — reads .env once, reuses thereafter."""
    global _settings_instance  # noqa: PLW0603
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
