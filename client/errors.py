"""
Client-side error types.

ApiError mirrors the server's ``{"error", "code"}`` body so callers can
tell inline-form errors (validation, auth) apart from everything else.
"""

from __future__ import annotations

from typing import Optional

import httpx


class ApiError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        code: str = "request_failed",
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.field = field

    @property
    def is_validation_error(self) -> bool:
        return self.status_code == 400

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_inline(self) -> bool:
        """Errors a form shows next to its inputs; anything else gets a retry prompt."""
        return self.is_validation_error or self.is_unauthorized

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            body.get("error") or f"request failed with status {response.status_code}",
            status_code=response.status_code,
            code=body.get("code") or "request_failed",
            field=body.get("field"),
        )


class ClientValidationError(ApiError):
    """Input rejected before any request was sent."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message, status_code=400, code="validation_error", field=field)
