"""
Response DTOs for authentication endpoints.

SignInResponse — POST /api/auth/signin (200); identical for new and existing users
VerifyResponse — POST /api/auth/verify (200)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from schemas.dto.responses.user import UserResponse

SIGN_IN_ACK_MESSAGE = "Verification code sent"


class SignInResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = SIGN_IN_ACK_MESSAGE


class VerifyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user: UserResponse
