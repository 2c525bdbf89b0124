"""
Typed async client for the Dog Cafe 6ix HTTP API.

Authenticated calls take the bearer token as an argument and send it on
that request only; the underlying HttpClient carries no default
Authorization header, so two sessions can share one client safely.
Responses are parsed into the same DTOs the server emits.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from client.config import ClientSettings
from client.errors import ApiError
from infrastructure.http_client import HttpClient
from schemas.dto.responses.auth import SignInResponse, VerifyResponse
from schemas.dto.responses.booking import BookingResponse
from schemas.dto.responses.plan import PlanResponse
from schemas.dto.responses.post import CommentsResponse, LikesResponse, PostResponse
from schemas.dto.responses.user import UserResponse


class DogCafeApiClient:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DogCafeApiClient":
        settings = settings or ClientSettings()
        return cls(
            HttpClient(
                timeout=settings.request_timeout_seconds,
                base_url=settings.api_url,
                transport=transport,
            )
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "DogCafeApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def _call(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Optional[dict] = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            raise ApiError(f"network error: {e}", code="network_error") from e
        if response.is_error:
            raise ApiError.from_response(response)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                "invalid response body", status_code=response.status_code, code="invalid_response"
            ) from e

    # ── Auth ─────────────────────────────────────────────────────────────────

    async def sign_in(self, email: str) -> SignInResponse:
        data = await self._call("POST", "/auth/signin", json={"email": email})
        return SignInResponse.model_validate(data)

    async def verify(self, email: str, code: str) -> VerifyResponse:
        data = await self._call("POST", "/auth/verify", json={"email": email, "code": code})
        return VerifyResponse.model_validate(data)

    # ── Users ────────────────────────────────────────────────────────────────

    async def get_current_user(self, token: str) -> UserResponse:
        return UserResponse.model_validate(await self._call("GET", "/users/me", token=token))

    async def update_profile(
        self,
        token: str,
        username: Optional[str] = None,
        profile_picture: Optional[str] = None,
    ) -> UserResponse:
        body: dict = {}
        if username is not None:
            body["username"] = username
        if profile_picture is not None:
            body["profilePicture"] = profile_picture
        data = await self._call("PUT", "/users/profile", token=token, json=body)
        return UserResponse.model_validate(data)

    # ── Plans ────────────────────────────────────────────────────────────────

    async def list_plans(self) -> list[PlanResponse]:
        return [PlanResponse.model_validate(p) for p in await self._call("GET", "/plans")]

    async def get_plan(self, plan_id: str) -> PlanResponse:
        return PlanResponse.model_validate(await self._call("GET", f"/plans/{plan_id}"))

    # ── Bookings ─────────────────────────────────────────────────────────────

    async def create_booking(
        self,
        token: str,
        plan_id: str,
        date: str,
        time: str,
        special_requests: Optional[str] = None,
    ) -> BookingResponse:
        body: dict = {"plan": plan_id, "date": date, "time": time}
        if special_requests:
            body["specialRequests"] = special_requests
        data = await self._call("POST", "/bookings", token=token, json=body)
        return BookingResponse.model_validate(data)

    async def list_my_bookings(self, token: str) -> list[BookingResponse]:
        data = await self._call("GET", "/bookings/user", token=token)
        return [BookingResponse.model_validate(b) for b in data]

    async def cancel_booking(self, token: str, booking_id: str) -> BookingResponse:
        data = await self._call("PUT", f"/bookings/{booking_id}/cancel", token=token)
        return BookingResponse.model_validate(data)

    # ── Feed ─────────────────────────────────────────────────────────────────

    async def create_post(
        self, token: str, content: str, image: Optional[str] = None
    ) -> PostResponse:
        body: dict = {"content": content}
        if image:
            body["image"] = image
        return PostResponse.model_validate(
            await self._call("POST", "/posts", token=token, json=body)
        )

    async def list_posts(self) -> list[PostResponse]:
        return [PostResponse.model_validate(p) for p in await self._call("GET", "/posts")]

    async def toggle_like(self, token: str, post_id: str) -> list[str]:
        data = await self._call("POST", f"/posts/{post_id}/like", token=token)
        return LikesResponse.model_validate(data).likes

    async def add_comment(self, token: str, post_id: str, content: str) -> CommentsResponse:
        data = await self._call(
            "POST", f"/posts/{post_id}/comments", token=token, json={"content": content}
        )
        return CommentsResponse.model_validate(data)
