"""
Bearer token issuing and verification (JWT).

RS256 is used when a key pair is configured, HS256 with the shared secret
otherwise. Tokens carry issuer/audience claims and the user id as ``sub``.
"""

from __future__ import annotations

from datetime import timedelta

import jwt

from config import JWTSettings
from errors import AuthenticationError
from shared.datetime_utils import utc_now


class TokenService:
    def __init__(self, settings: JWTSettings) -> None:
        self._settings = settings
        if settings.use_rs256:
            # Support keys provided via env with literal \n sequences
            self._signing_key = settings.jwt_private_key.replace("\\n", "\n")
            self._verify_key = settings.jwt_public_key.replace("\\n", "\n")
            self._algorithm = "RS256"
        else:
            if not settings.jwt_secret:
                raise RuntimeError(
                    "JWT_SECRET must be set when RS256 keys are not provided"
                )
            self._signing_key = settings.jwt_secret
            self._verify_key = settings.jwt_secret
            self._algorithm = "HS256"

    @property
    def ttl_seconds(self) -> int:
        return self._settings.access_token_ttl_seconds

    def issue(self, user_id: str) -> str:
        now = utc_now()
        claims = {
            "iss": self._settings.jwt_issuer,
            "aud": self._settings.jwt_audience,
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self.ttl_seconds)).timestamp()),
        }
        return jwt.encode(claims, self._signing_key, algorithm=self._algorithm)

    def subject(self, token: str) -> str:
        """Verify *token* and return its subject.

        Raises:
            AuthenticationError: bad signature, expired, wrong issuer/audience,
                or no subject.
        """
        try:
            claims = jwt.decode(
                token,
                self._verify_key,
                algorithms=[self._algorithm],
                audience=self._settings.jwt_audience,
                issuer=self._settings.jwt_issuer,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("invalid token")

        sub = claims.get("sub")
        if not sub:
            raise AuthenticationError("invalid token")
        return sub
