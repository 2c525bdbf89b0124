"""Sign-in code generation."""

from __future__ import annotations

import secrets
import string


def generate_otp_code(length: int = 4) -> str:
    """Return *length* random decimal digits drawn with ``secrets``; may start with 0."""
    return "".join(secrets.choice(string.digits) for _ in range(length))
