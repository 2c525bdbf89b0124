"""
Client-side session manager.

Holds at most one signed-in identity: the current user plus the bearer
token persisted in a TokenStore. Navigation is reported through an optional
callback so any UI layer can follow the session between the signed-out,
verification and signed-in areas.

Overlapping operations are not deduplicated; whichever response resolves
last decides the final state.
"""

from __future__ import annotations

import enum
from typing import Callable, Optional

import httpx
from pydantic import ValidationError as SchemaError

from client.api_client import DogCafeApiClient
from client.config import ClientSettings
from client.errors import ApiError, ClientValidationError
from client.token_store import TOKEN_KEY, FileTokenStore, TokenStore
from schemas.dto.responses.user import UserResponse
from shared.logging import get_logger
from shared.validators import validate_verification_code

log = get_logger(__name__)


class Route(str, enum.Enum):
    SIGNED_OUT = "/(auth)"
    VERIFY = "/(auth)/verify"
    SIGNED_IN = "/(tabs)"


NavigateCallback = Callable[[Route, dict], None]


class SessionManager:
    def __init__(
        self,
        api: DogCafeApiClient,
        store: TokenStore,
        on_navigate: Optional[NavigateCallback] = None,
    ) -> None:
        self._api = api
        self._store = store
        self._on_navigate = on_navigate
        self.user: Optional[UserResponse] = None
        self.is_loading = False
        self.route = Route.SIGNED_OUT
        self.route_params: dict = {}
        self._token: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        on_navigate: Optional[NavigateCallback] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SessionManager":
        """Session backed by the on-disk token file named in *settings*."""
        settings = settings or ClientSettings()
        api = DogCafeApiClient.from_settings(settings, transport=transport)
        return cls(api, FileTokenStore(settings.token_file), on_navigate)

    async def aclose(self) -> None:
        await self._api.aclose()

    @property
    def is_signed_in(self) -> bool:
        return self.user is not None and self._token is not None

    @property
    def token(self) -> Optional[str]:
        """Bearer token for this session, for screens that call the API directly."""
        return self._token

    def _navigate(self, route: Route, **params) -> None:
        self.route = route
        self.route_params = params
        if self._on_navigate is not None:
            self._on_navigate(route, params)

    async def _forget_token(self) -> None:
        self._token = None
        try:
            await self._store.delete(TOKEN_KEY)
        except OSError as e:
            log.warning("token_delete_failed", error=str(e))

    async def start(self) -> bool:
        """Restore a persisted session. Any failure leaves the session signed out."""
        self.is_loading = True
        try:
            try:
                token = await self._store.get(TOKEN_KEY)
            except OSError as e:
                log.warning("token_read_failed", error=str(e))
                return False
            if not token:
                return False
            try:
                user = await self._api.get_current_user(token)
            except (ApiError, SchemaError) as e:
                log.info("session_restore_failed", error_type=type(e).__name__, error=str(e))
                await self._forget_token()
                return False
            self._token = token
            self.user = user
            self._navigate(Route.SIGNED_IN)
            return True
        finally:
            self.is_loading = False

    async def sign_in(self, email: str) -> None:
        """Request a code for *email* and move to the verification step.

        Raises:
            ClientValidationError: email empty or obviously malformed.
            ApiError: the server rejected the request.
        """
        email = (email or "").strip()
        if not email:
            raise ClientValidationError("Email is required", field="email")
        if "@" not in email:
            raise ClientValidationError("Please enter a valid email", field="email")

        self.is_loading = True
        try:
            await self._api.sign_in(email)
            self._navigate(Route.VERIFY, email=email)
        finally:
            self.is_loading = False

    async def verify(self, email: str, code: str) -> bool:
        """Redeem *code*; True on success, False for any failure (shown inline)."""
        code = (code or "").strip()
        if not validate_verification_code(code):
            return False

        self.is_loading = True
        try:
            try:
                result = await self._api.verify(email, code)
            except (ApiError, SchemaError) as e:
                log.info("verify_code_failed", error_type=type(e).__name__, error=str(e))
                return False
            try:
                await self._store.set(TOKEN_KEY, result.token)
            except OSError as e:
                # Signed in for this run; the next start() will ask again
                log.warning("token_save_failed", error=str(e))
            self._token = result.token
            self.user = result.user
            self._navigate(Route.SIGNED_IN)
            return True
        finally:
            self.is_loading = False

    async def sign_out(self) -> None:
        self.is_loading = True
        try:
            await self._forget_token()
            self.user = None
            self._navigate(Route.SIGNED_OUT)
        finally:
            self.is_loading = False

    async def update_profile(
        self, username: Optional[str] = None, profile_picture: Optional[str] = None
    ) -> UserResponse:
        """Update the signed-in user's profile and adopt the server's copy.

        Raises:
            ApiError: not signed in (401) or the server rejected the update.
        """
        if self._token is None:
            raise ApiError("Authentication required", status_code=401, code="authentication_error")

        self.is_loading = True
        try:
            self.user = await self._api.update_profile(
                self._token, username=username, profile_picture=profile_picture
            )
            return self.user
        finally:
            self.is_loading = False
