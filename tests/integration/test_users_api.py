"""Integration tests for bearer authentication and the /api/users endpoints."""

import pytest
from bson import ObjectId

from config import JWTSettings
from services.token_service import TokenService


class TestAuthentication:
    async def test_missing_header(self, api):
        resp = await api.get("/api/users/me")
        assert resp.status_code == 401
        assert resp.json()["code"] == "authentication_error"
        assert resp.headers["www-authenticate"] == "Bearer"

    @pytest.mark.parametrize(
        "header",
        ["Token abc", "Bearer", "Bearer not.a.jwt", "abc"],
        ids=["wrong_scheme", "no_token", "garbage_token", "no_scheme"],
    )
    async def test_malformed_header(self, api, header):
        resp = await api.get("/api/users/me", headers={"Authorization": header})
        assert resp.status_code == 401

    async def test_token_signed_with_other_secret(self, api, sign_in):
        _, user = await sign_in()
        forged = TokenService(JWTSettings(jwt_secret="someone-else")).issue(user["_id"])
        resp = await api.get("/api/users/me", headers={"Authorization": f"Bearer {forged}"})
        assert resp.status_code == 401

    async def test_expired_token(self, api, settings, sign_in):
        _, user = await sign_in()
        stale = TokenService(
            JWTSettings(jwt_secret=settings.jwt.jwt_secret, access_token_ttl_seconds=-60)
        ).issue(user["_id"])
        resp = await api.get("/api/users/me", headers={"Authorization": f"Bearer {stale}"})
        assert resp.status_code == 401

    async def test_token_for_unknown_user(self, api, settings):
        token = TokenService(settings.jwt).issue(str(ObjectId()))
        resp = await api.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401

    async def test_token_for_deleted_user(self, api, db, sign_in):
        headers, user = await sign_in()
        await db["users"].delete_one({"_id": ObjectId(user["_id"])})
        resp = await api.get("/api/users/me", headers=headers)
        assert resp.status_code == 401


class TestCurrentUser:
    async def test_returns_profile(self, api, sign_in):
        headers, user = await sign_in("walker@example.com")
        resp = await api.get("/api/users/me", headers=headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["_id"] == user["_id"]
        assert body["email"] == "walker@example.com"
        assert body["username"] is None
        assert body["profilePicture"] is None


class TestUpdateProfile:
    async def test_updates_both_fields(self, api, sign_in):
        headers, _ = await sign_in()
        resp = await api.put(
            "/api/users/profile",
            headers=headers,
            json={"username": "rex_owner", "profilePicture": "https://img.example.com/rex.png"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["username"] == "rex_owner"
        assert body["profilePicture"] == "https://img.example.com/rex.png"

        me = await api.get("/api/users/me", headers=headers)
        assert me.json()["username"] == "rex_owner"

    async def test_omitted_field_left_unchanged(self, api, sign_in):
        headers, _ = await sign_in()
        await api.put(
            "/api/users/profile",
            headers=headers,
            json={"username": "rex_owner", "profilePicture": "https://img.example.com/rex.png"},
        )
        resp = await api.put("/api/users/profile", headers=headers, json={"username": "bella"})
        assert resp.json()["username"] == "bella"
        assert resp.json()["profilePicture"] == "https://img.example.com/rex.png"

    async def test_empty_values_ignored(self, api, sign_in):
        headers, _ = await sign_in()
        await api.put("/api/users/profile", headers=headers, json={"username": "rex_owner"})
        resp = await api.put(
            "/api/users/profile", headers=headers, json={"username": "", "profilePicture": ""}
        )
        assert resp.status_code == 200
        assert resp.json()["username"] == "rex_owner"
        assert resp.json()["profilePicture"] is None

    async def test_requires_authentication(self, api):
        resp = await api.put("/api/users/profile", json={"username": "rex_owner"})
        assert resp.status_code == 401
