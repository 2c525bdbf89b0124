"""Response shapes that are not tied to one resource: errors and the health probe."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx answer; mirrors AppError.to_dict()."""

    error: str
    code: str
    field: Optional[str] = None
    details: Optional[Any] = None


# OpenAPI entries for the failures any authenticated /api route can produce
AUTH_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired bearer token"},
    404: {"model": ErrorResponse, "description": "Referenced resource does not exist"},
}


class HealthResponse(BaseModel):
    status: Literal["healthy", "unhealthy"]
    checks: dict[str, Literal["ok", "error"]]
