"""Unit tests for the AppError hierarchy and its exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from errors import (
    AppError,
    AuthenticationError,
    ExpiredCodeError,
    InvalidCodeError,
    NotFoundError,
    ValidationError,
    register_error_handlers,
)


class TestAppErrorSubclasses:
    def test_validation_error(self):
        e = ValidationError("bad input")
        assert e.status_code == 400
        assert e.error_code == "validation_error"
        assert e.message == "bad input"

    @pytest.mark.parametrize(
        "cls, code",
        [(InvalidCodeError, "invalid_code"), (ExpiredCodeError, "expired_code")],
        ids=["invalid", "expired"],
    )
    def test_code_errors_are_validation_errors(self, cls, code):
        e = cls("nope")
        assert isinstance(e, ValidationError)
        assert e.status_code == 400
        assert e.error_code == code

    def test_authentication_error(self):
        e = AuthenticationError("not authenticated")
        assert e.status_code == 401
        assert e.error_code == "authentication_error"

    def test_not_found_error(self):
        e = NotFoundError("resource missing")
        assert e.status_code == 404
        assert e.error_code == "not_found"

    def test_base_defaults_to_500(self):
        e = AppError("boom")
        assert e.status_code == 500
        assert e.error_code == "internal_error"


class TestAppErrorToDict:
    def test_basic(self):
        e = NotFoundError("post not found")
        assert e.to_dict() == {"error": "post not found", "code": "not_found"}

    @pytest.mark.parametrize(
        "kwargs, key, value",
        [
            ({"field": "email"}, "field", "email"),
            ({"details": {"length": 4}}, "details", {"length": 4}),
        ],
        ids=["with_field", "with_details"],
    )
    def test_optional_key_present(self, kwargs, key, value):
        e = ValidationError("invalid", **kwargs)
        assert e.to_dict()[key] == value

    def test_no_optional_keys_when_absent(self):
        d = NotFoundError("missing").to_dict()
        assert "field" not in d
        assert "details" not in d


class _Body(BaseModel):
    count: int


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/app-error")
    async def app_error():
        raise InvalidCodeError("Invalid verification code", field="code")

    @app.post("/body")
    async def body(payload: _Body):
        return {"count": payload.count}

    @app.get("/crash")
    async def crash():
        raise RuntimeError("unexpected")

    return app


class TestErrorHandlers:
    def test_app_error_rendered(self):
        with TestClient(_app()) as client:
            resp = client.get("/app-error")
        assert resp.status_code == 400
        assert resp.json() == {
            "error": "Invalid verification code",
            "code": "invalid_code",
            "field": "code",
        }

    def test_request_validation_becomes_400(self):
        with TestClient(_app()) as client:
            resp = client.post("/body", json={"count": "many"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "validation_error"
        assert body["field"] == "count"

    def test_unhandled_exception_becomes_500(self):
        with TestClient(_app(), raise_server_exceptions=False) as client:
            resp = client.get("/crash")
        assert resp.status_code == 500
        assert resp.json()["code"] == "internal_error"
        assert "unexpected" not in resp.json()["error"]

    def test_unhandled_exception_logged(self, mocker):
        log = mocker.patch("errors.log")
        with TestClient(_app(), raise_server_exceptions=False) as client:
            client.get("/crash")
        log.error.assert_called_once()
        args, kwargs = log.error.call_args
        assert args == ("unhandled_exception",)
        assert kwargs["path"] == "/crash"
        assert kwargs["error_type"] == "RuntimeError"

    def test_authentication_error_sets_challenge_header(self):
        resp = AuthenticationError("Authentication required").to_response()
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"
