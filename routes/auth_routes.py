"""
Authentication endpoints.

POST /api/auth/signin — request a one-time code by email
POST /api/auth/verify — exchange email + code for a bearer token
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_auth_service
from schemas.dto.requests.auth import SignInRequest, VerifyRequest
from schemas.dto.responses.auth import SignInResponse, VerifyResponse
from schemas.dto.responses.user import UserResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    body: SignInRequest, auth: AuthService = Depends(get_auth_service)
) -> SignInResponse:
    await auth.sign_in(body.email)
    return SignInResponse()


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    body: VerifyRequest, auth: AuthService = Depends(get_auth_service)
) -> VerifyResponse:
    token, user = await auth.verify(body.email, body.code)
    return VerifyResponse(token=token, user=UserResponse.from_doc(user))
