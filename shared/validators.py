"""
Input validators — framework-agnostic, pure functions.

Used by the API services and by the client-side session manager so both
sides agree on what a well-formed email and sign-in code look like.
"""

from __future__ import annotations

import re
from typing import Optional

import validators as _validators


def normalize_email(email: Optional[str]) -> str:
    """Trim and lower-case *email*; ``None`` becomes the empty string."""
    return (email or "").strip().lower()


def validate_email(email: str) -> bool:
    """Return True if *email* is a syntactically valid address."""
    if not email:
        return False
    return bool(_validators.email(email))


def validate_verification_code(code: str, length: int = 4) -> bool:
    """Return True if *code* is exactly *length* decimal digits."""
    return bool(re.fullmatch(rf"\d{{{length}}}", code or ""))


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
