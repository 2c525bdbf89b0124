"""The interface AuthService uses to deliver sign-in codes."""

from typing import Optional, Protocol


class EmailProvider(Protocol):
    async def send_sign_in_code(
        self, email: str, username: Optional[str], code: str, ttl_minutes: int
    ) -> bool:
        """Deliver *code* to *email*; False when delivery failed."""
        ...
