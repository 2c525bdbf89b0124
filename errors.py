"""
Error types raised by services and the handlers that render them.

Every typed error derives from AppError and is rendered as

    {"error": <message>, "code": <error_code>, "field"?: ..., "details"?: ...}

with the class's HTTP status. FastAPI's own body-validation failures are
folded into the same 400 ``validation_error`` shape so clients only ever see
one error format. Anything untyped is logged and answered with a bare 500
(Sentry, when initialised, captures it first).
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.logging import get_logger

log = get_logger(__name__)


class AppError(Exception):
    """Base for all typed errors; subclasses only override the class attributes."""

    status_code: int = 500
    error_code: str = "internal_error"
    headers: Optional[dict[str, str]] = None

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        body: dict = {"error": self.message, "code": self.error_code}
        for key in ("field", "details"):
            value = getattr(self, key)
            if value is not None:
                body[key] = value
        return body

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code, content=self.to_dict(), headers=self.headers
        )


class ValidationError(AppError):
    status_code = 400
    error_code = "validation_error"


class InvalidCodeError(ValidationError):
    """No pending sign-in code for the email, or the code does not match."""

    error_code = "invalid_code"


class ExpiredCodeError(ValidationError):
    error_code = "expired_code"


class AuthenticationError(AppError):
    status_code = 401
    error_code = "authentication_error"
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(AppError):
    status_code = 404
    error_code = "not_found"


def _first_error_field(exc: RequestValidationError) -> Optional[str]:
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc:
            return ".".join(loc)
    return None


async def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    return exc.to_response()


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    field = _first_error_field(exc)
    message = f"{field} is invalid or missing" if field else "invalid request body"
    return ValidationError(message, field=field).to_response()


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    log.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return AppError("An internal server error occurred.").to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""
    app.add_exception_handler(AppError, _handle_app_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
