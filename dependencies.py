"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions used with
FastAPI's Depends() system. Long-lived objects (db handle, settings, token
service, email provider) live on app.state; repositories and services are
cheap and built per request.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import AppSettings
from errors import AuthenticationError
from infrastructure.email.protocol import EmailProvider
from repositories.booking_repository import BookingRepository
from repositories.plan_repository import PlanRepository
from repositories.post_repository import PostRepository
from repositories.user_repository import UserRepository
from repositories.verification_code_repository import VerificationCodeRepository
from schemas.models.user import UserDoc
from services.auth_service import AuthService
from services.booking_service import BookingService
from services.plan_service import PlanService
from services.post_service import PostService
from services.token_service import TokenService
from services.user_service import UserService

# auto_error=False so a missing header reaches get_current_user and is
# reported with the app's own 401 body instead of FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_db(request: Request):
    """Return the async MongoDB database from app.state."""
    return request.app.state.db


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_email_provider(request: Request) -> EmailProvider:
    return request.app.state.email_provider


# ── Repositories ─────────────────────────────────────────────────────────────


def get_user_repo(db=Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_code_repo(db=Depends(get_db)) -> VerificationCodeRepository:
    return VerificationCodeRepository(db)


def get_plan_repo(db=Depends(get_db)) -> PlanRepository:
    return PlanRepository(db)


def get_booking_repo(db=Depends(get_db)) -> BookingRepository:
    return BookingRepository(db)


def get_post_repo(db=Depends(get_db)) -> PostRepository:
    return PostRepository(db)


# ── Services ─────────────────────────────────────────────────────────────────


def get_auth_service(
    settings: AppSettings = Depends(get_settings),
    users: UserRepository = Depends(get_user_repo),
    codes: VerificationCodeRepository = Depends(get_code_repo),
    tokens: TokenService = Depends(get_token_service),
    email: EmailProvider = Depends(get_email_provider),
) -> AuthService:
    return AuthService(users, codes, tokens, email, settings.verification)


def get_user_service(users: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(users)


def get_plan_service(plans: PlanRepository = Depends(get_plan_repo)) -> PlanService:
    return PlanService(plans)


def get_booking_service(
    bookings: BookingRepository = Depends(get_booking_repo),
    plans: PlanRepository = Depends(get_plan_repo),
) -> BookingService:
    return BookingService(bookings, plans)


def get_post_service(
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
) -> PostService:
    return PostService(posts, users)


# ── Authentication ───────────────────────────────────────────────────────────


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> UserDoc:
    """Resolve ``Authorization: Bearer <token>`` to the calling user.

    Raises AuthenticationError (401) when the header is absent or malformed,
    the token fails verification, or its user no longer exists.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Authentication required")
    return await auth.authenticate(credentials.credentials)


CurrentUser = Annotated[UserDoc, Depends(get_current_user)]
