"""Client-side configuration via pydantic-settings (``DOGCAFE_`` env prefix)."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DOGCAFE_", env_file=".env", extra="ignore"
    )

    api_url: str = "http://localhost:3000/api"
    request_timeout_seconds: float = 10.0
    # read by SessionManager.from_settings for its FileTokenStore
    token_file: str = "~/.dogcafe6ix/credentials.json"
