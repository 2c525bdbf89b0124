"""Settings classes: defaults, environment overrides and sub-config assembly."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from client.config import ClientSettings
from config import (
    AppSettings,
    DatabaseSettings,
    EmailSettings,
    JWTSettings,
    LoggingSettings,
    SentrySettings,
    VerificationSettings,
)

MONGO_URI = "mongodb://localhost:27017/"


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", MONGO_URI)
    return monkeypatch


@pytest.mark.parametrize(
    "settings_cls, field, expected",
    [
        (DatabaseSettings, "db_name", "dogcafe6ix"),
        (JWTSettings, "jwt_issuer", "dogcafe6ix"),
        (JWTSettings, "jwt_audience", "dogcafe6ix.app"),
        (JWTSettings, "access_token_ttl_seconds", 604800),
        (JWTSettings, "jwt_secret", ""),
        (VerificationSettings, "verification_code_length", 4),
        (VerificationSettings, "verification_code_ttl_seconds", 900),
        (EmailSettings, "zepto_api_token", ""),
        (LoggingSettings, "log_format", "console"),
        (SentrySettings, "sentry_dsn", ""),
    ],
)
def test_defaults(env, settings_cls, field, expected):
    env.delenv(field.upper(), raising=False)
    assert getattr(settings_cls(), field) == expected


def test_env_overrides_default(env):
    env.setenv("VERIFICATION_CODE_TTL_SECONDS", "60")
    assert VerificationSettings().verification_code_ttl_seconds == 60


def test_mongodb_uri_required(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    with pytest.raises(PydanticValidationError):
        DatabaseSettings()


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({"JWT_PRIVATE_KEY": "priv", "JWT_PUBLIC_KEY": "pub"}, True),
        ({"JWT_PRIVATE_KEY": "priv"}, False),
        ({}, False),
    ],
    ids=["both_keys", "private_only", "none"],
)
def test_rs256_needs_both_keys(monkeypatch, keys, expected):
    for var in ("JWT_PRIVATE_KEY", "JWT_PUBLIC_KEY"):
        monkeypatch.delenv(var, raising=False)
    for var, value in keys.items():
        monkeypatch.setenv(var, value)
    assert JWTSettings().use_rs256 is expected


class TestAppSettings:
    def test_builds_every_sub_config(self, env):
        s = AppSettings()
        assert isinstance(s.db, DatabaseSettings)
        assert s.db.mongodb_uri == MONGO_URI
        assert isinstance(s.jwt, JWTSettings)
        assert isinstance(s.verification, VerificationSettings)
        assert isinstance(s.email, EmailSettings)
        assert isinstance(s.logging, LoggingSettings)
        assert isinstance(s.sentry, SentrySettings)

    def test_given_sub_config_is_used_as_is(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)
        db = DatabaseSettings(mongodb_uri="mongodb://db.internal:27017/", db_name="other")
        assert AppSettings(db=db).db is db

    def test_seed_plans_on_by_default(self, env):
        env.delenv("SEED_PLANS", raising=False)
        assert AppSettings().seed_plans is True

    def test_seed_plans_can_be_disabled(self, env):
        env.setenv("SEED_PLANS", "false")
        assert AppSettings().seed_plans is False

    def test_cors_allows_all_by_default(self, env):
        env.delenv("CORS_ORIGINS", raising=False)
        assert AppSettings().cors_origins == ["*"]


class TestClientSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DOGCAFE_API_URL", raising=False)
        s = ClientSettings()
        assert s.api_url == "http://localhost:3000/api"
        assert s.request_timeout_seconds == 10.0

    def test_prefixed_env_var(self, monkeypatch):
        monkeypatch.setenv("DOGCAFE_API_URL", "https://api.dogcafe6ix.com/api")
        assert ClientSettings().api_url == "https://api.dogcafe6ix.com/api"
