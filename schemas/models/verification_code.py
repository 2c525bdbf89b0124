"""
Verification code document model.

Maps to the `verification-codes` MongoDB collection.

One document per email: requesting a new sign-in code overwrites the old
one. code_hash stores SHA-256(code) — the plain code is never stored. The
document is deleted as soon as the code is redeemed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.base import MongoBaseModel


class VerificationCodeDoc(MongoBaseModel):
    """Document model for the `verification-codes` collection."""

    email: str
    code_hash: str
    expires_at: datetime
    created_at: Optional[datetime] = None
