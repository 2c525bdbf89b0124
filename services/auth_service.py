"""
Email + one-time code authentication.

sign_in  — find-or-create the user, store a fresh code, hand it to the mailer
verify   — redeem the code (single use) for a bearer token
authenticate — resolve a bearer token back to its user
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from config import VerificationSettings
from errors import (
    AuthenticationError,
    ExpiredCodeError,
    InvalidCodeError,
    ValidationError,
)
from infrastructure.email.protocol import EmailProvider
from repositories.user_repository import UserRepository
from repositories.verification_code_repository import VerificationCodeRepository
from schemas.models.base import parse_object_id
from schemas.models.user import UserDoc
from services.token_service import TokenService
from shared.crypto import hash_token, token_matches
from shared.datetime_utils import is_expired, utc_now
from shared.generators import generate_otp_code
from shared.logging import get_logger
from shared.validators import is_blank, normalize_email, validate_email

log = get_logger(__name__)


class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        code_repo: VerificationCodeRepository,
        token_service: TokenService,
        email_provider: EmailProvider,
        settings: VerificationSettings,
    ) -> None:
        self._users = user_repo
        self._codes = code_repo
        self._tokens = token_service
        self._email = email_provider
        self._settings = settings

    async def sign_in(self, email: Optional[str]) -> None:
        """Issue a sign-in code for *email*.

        Succeeds the same way whether the user already existed or was just
        created, so callers cannot tell sign-up from sign-in.
        """
        email = normalize_email(email)
        if not email:
            raise ValidationError("email is required", field="email")
        if not validate_email(email):
            raise ValidationError("email is invalid", field="email")

        user = await self._users.find_or_create(email)

        code = generate_otp_code(self._settings.verification_code_length)
        ttl = self._settings.verification_code_ttl_seconds
        expires_at = utc_now() + timedelta(seconds=ttl)
        await self._codes.upsert(email, hash_token(code), expires_at)

        # delivery problems are logged only; the response never reveals them
        try:
            sent = await self._email.send_sign_in_code(
                email, user.username, code, ttl_minutes=ttl // 60
            )
        except Exception as e:
            log.error(
                "sign_in_code_delivery_failed",
                user_id=str(user.id),
                error=str(e),
                error_type=type(e).__name__,
            )
        else:
            if not sent:
                log.warning("sign_in_code_delivery_failed", user_id=str(user.id))
        log.info("sign_in_code_created", user_id=str(user.id))

    async def verify(self, email: Optional[str], code: Optional[str]) -> tuple[str, UserDoc]:
        """Redeem *code* for *email*; returns ``(token, user)``.

        Raises:
            ValidationError: email or code missing.
            InvalidCodeError: no pending code, or it does not match.
            ExpiredCodeError: the pending code is past its expiry.
        """
        email = normalize_email(email)
        if not email:
            raise ValidationError("email is required", field="email")
        if is_blank(code):
            raise ValidationError("code is required", field="code")
        code = code.strip()

        pending = await self._codes.find_by_email(email)
        if pending is None or not token_matches(code, pending.code_hash):
            log.warning(
                "verify_failed",
                reason="code_not_found" if pending is None else "code_mismatch",
            )
            raise InvalidCodeError("Invalid verification code", field="code")

        if is_expired(pending.expires_at):
            log.warning("verify_failed", reason="expired")
            raise ExpiredCodeError("Verification code expired", field="code")

        if not await self._codes.consume(email, pending.code_hash):
            # Redeemed by a concurrent request between the read and the delete
            log.warning("verify_failed", reason="already_used")
            raise InvalidCodeError("Invalid verification code", field="code")

        user = await self._users.find_or_create(email)
        token = self._tokens.issue(str(user.id))
        log.info("verify_success", user_id=str(user.id))
        return token, user

    async def authenticate(self, token: Optional[str]) -> UserDoc:
        """Resolve a bearer token to its user or raise AuthenticationError."""
        if not token:
            raise AuthenticationError("Authentication required")

        subject = self._tokens.subject(token)
        user_id = parse_object_id(subject)
        if user_id is None:
            raise AuthenticationError("invalid token")

        user = await self._users.find_by_id(user_id)
        if user is None:
            log.warning("authenticate_failed", reason="user_not_found", user_id=subject)
            raise AuthenticationError("User not found")
        return user
