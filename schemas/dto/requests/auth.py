"""
Request DTOs for authentication endpoints.

SignInRequest  — POST /api/auth/signin
VerifyRequest  — POST /api/auth/verify

Fields are optional at the schema level so that a missing value reaches the
service and is reported as a ``validation_error`` naming the field.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SignInRequest(BaseModel):
    """Request body for POST /api/auth/signin."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None


class VerifyRequest(BaseModel):
    """Request body for POST /api/auth/verify.

    ``code`` is the 4-digit code delivered out-of-band after sign-in.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    code: Optional[str] = None
