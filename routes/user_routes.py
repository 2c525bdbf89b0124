"""
User endpoints (authenticated).

GET /api/users/me       — the calling user
PUT /api/users/profile  — update username / profilePicture
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import CurrentUser, get_user_service
from schemas.dto.requests.user import UpdateProfileRequest
from schemas.dto.responses.common import AUTH_ERROR_RESPONSES
from schemas.dto.responses.user import UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"], responses=AUTH_ERROR_RESPONSES)


@router.get("/me", response_model=UserResponse)
async def get_me(user: CurrentUser) -> UserResponse:
    return UserResponse.from_doc(user)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    body: UpdateProfileRequest,
    user: CurrentUser,
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    updated = await users.update_profile(user, body.to_updates())
    return UserResponse.from_doc(updated)
