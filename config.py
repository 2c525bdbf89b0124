"""
Settings for the Dog Cafe 6ix API, read with pydantic-settings.

Each concern has its own settings class so services only receive the slice
they use. Values come from the process environment first and ``.env`` second;
field names map to upper-case variable names (``jwt_secret`` -> ``JWT_SECRET``).

``AppSettings()`` builds every sub-config it was not handed, which is how the
ASGI entrypoint boots. Tests construct the pieces directly instead.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class _EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class DatabaseSettings(_EnvSettings):
    mongodb_uri: str
    db_name: str = "dogcafe6ix"


class JWTSettings(_EnvSettings):
    """Access-token signing. RS256 when both PEM keys are set, else HS256 with ``jwt_secret``."""

    jwt_issuer: str = "dogcafe6ix"
    jwt_audience: str = "dogcafe6ix.app"
    access_token_ttl_seconds: int = 7 * 24 * 3600

    jwt_private_key: str = ""
    jwt_public_key: str = ""
    jwt_secret: str = ""

    @property
    def use_rs256(self) -> bool:
        return bool(self.jwt_private_key and self.jwt_public_key)


class VerificationSettings(_EnvSettings):
    verification_code_length: int = 4
    verification_code_ttl_seconds: int = 15 * 60


class EmailSettings(_EnvSettings):
    # no token: codes go to the log (ConsoleEmailProvider)
    zepto_api_token: str = ""
    zepto_from_email: str = "noreply@dogcafe6ix.com"
    zepto_from_name: str = "Dog Cafe 6ix"


class LoggingSettings(_EnvSettings):
    log_level: str = "INFO"
    log_format: str = "console"


class SentrySettings(_EnvSettings):
    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1
    sentry_profile_sample_rate: float = 0.05


_SUB_CONFIGS = {
    "db": DatabaseSettings,
    "jwt": JWTSettings,
    "verification": VerificationSettings,
    "email": EmailSettings,
    "logging": LoggingSettings,
    "sentry": SentrySettings,
}


class AppSettings(_EnvSettings):
    env: str = "development"
    app_name: str = "Dog Cafe 6ix"
    cors_origins: list[str] = ["*"]
    docs_url: Optional[str] = "/docs"

    # insert DEFAULT_PLANS at startup if the plans collection is empty
    seed_plans: bool = True

    db: Optional[DatabaseSettings] = None
    jwt: Optional[JWTSettings] = None
    verification: Optional[VerificationSettings] = None
    email: Optional[EmailSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _fill_missing_sub_configs(self) -> "AppSettings":
        for name, settings_cls in _SUB_CONFIGS.items():
            if getattr(self, name) is None:
                setattr(self, name, settings_cls())
        return self
