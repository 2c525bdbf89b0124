"""
Fixtures for API integration tests.

The real app (create_app + lifespan) runs against an in-memory
mongomock-motor client and a recording email provider, and is driven
through httpx's ASGI transport. No network connections are made.
"""

from typing import Optional

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app import create_app
from config import AppSettings, DatabaseSettings, JWTSettings, LoggingSettings

TEST_JWT_SECRET = "test-secret"


class RecordingEmailProvider:
    """EmailProvider that keeps every sign-in code it is asked to send."""

    def __init__(self, deliver: bool = True) -> None:
        self.deliver = deliver
        self.sent: list[dict] = []

    async def send_sign_in_code(
        self, email: str, username: Optional[str], code: str, ttl_minutes: int
    ) -> bool:
        self.sent.append(
            {"email": email, "username": username, "code": code, "ttl_minutes": ttl_minutes}
        )
        return self.deliver

    def last_code(self, email: str) -> str:
        for entry in reversed(self.sent):
            if entry["email"] == email:
                return entry["code"]
        raise AssertionError(f"no sign-in code was sent to {email}")


@pytest.fixture
def settings():
    return AppSettings(
        db=DatabaseSettings(mongodb_uri="mongodb://localhost:27017/", db_name="dogcafe6ix-test"),
        jwt=JWTSettings(jwt_secret=TEST_JWT_SECRET),
        logging=LoggingSettings(log_level="WARNING", log_format="console"),
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def db(mongo_client, settings):
    return mongo_client[settings.db.db_name]


@pytest.fixture
def mailer():
    return RecordingEmailProvider()


@pytest.fixture
async def app(settings, mongo_client, mailer):
    application = create_app(settings, mongo_client=mongo_client, email_provider=mailer)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def api(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def sign_in(api, mailer):
    """Run the full email + code flow; returns ``(auth_headers, user_json)``."""

    async def _sign_in(email: str = "owner@example.com"):
        resp = await api.post("/api/auth/signin", json={"email": email})
        assert resp.status_code == 200
        normalized = email.strip().lower()
        resp = await api.post(
            "/api/auth/verify",
            json={"email": normalized, "code": mailer.last_code(normalized)},
        )
        assert resp.status_code == 200
        body = resp.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _sign_in
