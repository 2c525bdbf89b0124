"""ZeptoMail implementation of EmailProvider.

Delivers the sign-in code through the ZeptoMail transactional API over the
shared async HttpClient. The HTML part is rendered from
``templates/emails/sign_in_code.html``; a plain-text part is always sent too.
Failures are logged and reported as ``False``, never raised.
"""

import os
from typing import Optional

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import EmailSettings
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)

ZEPTO_API_URL = "https://api.zeptomail.in/v1.1/email"
ZEPTO_KEY_PREFIX = "Zoho-enczapikey "
SIGN_IN_TEMPLATE = "sign_in_code.html"

_TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates", "emails"
)


class ZeptoMailProvider:
    def __init__(
        self,
        settings: EmailSettings,
        http_client: HttpClient,
        app_name: str = "Dog Cafe 6ix",
        template_dir: str = _TEMPLATE_DIR,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._app_name = app_name
        self._jinja = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )

    @property
    def _authorization(self) -> str:
        token = self._settings.zepto_api_token
        return token if token.startswith(ZEPTO_KEY_PREFIX) else ZEPTO_KEY_PREFIX + token

    def _message(self, to_email: str, to_name: Optional[str], subject: str, html: str, text: str) -> dict:
        sender = {"address": self._settings.zepto_from_email, "name": self._settings.zepto_from_name}
        recipient = {"email_address": {"address": to_email, "name": to_name or to_email}}
        return {
            "from": sender,
            "to": [recipient],
            "subject": subject,
            "htmlbody": html,
            "textbody": text,
        }

    async def send_sign_in_code(
        self, email: str, username: Optional[str], code: str, ttl_minutes: int
    ) -> bool:
        if not self._settings.zepto_api_token:
            log.error("zepto_mail_send_failed", reason="token_not_configured")
            return False

        subject = f"Your sign-in code - {self._app_name}"
        html = self._jinja.get_template(SIGN_IN_TEMPLATE).render(
            otp_code=code,
            user_name=username,
            app_name=self._app_name,
            ttl_minutes=ttl_minutes,
        )
        greeting = f"Hello {username}," if username else "Hello,"
        text = (
            f"{greeting}\n\n"
            f"Your {self._app_name} sign-in code is: {code}\n\n"
            f"This code expires in {ttl_minutes} minutes."
        )
        message = self._message(email, username, subject, html, text)

        try:
            response = await self._http.post(
                ZEPTO_API_URL,
                json=message,
                headers={"Authorization": self._authorization},
            )
        except httpx.HTTPError as e:
            log.error("sign_in_email_error", to_email=email, error=str(e), error_type=type(e).__name__)
            return False

        if not 200 <= response.status_code < 300:
            log.error(
                "sign_in_email_rejected",
                to_email=email,
                status_code=response.status_code,
                response=response.text[:200],
            )
            return False

        log.info("sign_in_email_sent", to_email=email)
        return True
