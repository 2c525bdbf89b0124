"""Data access for the `verification-codes` collection."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.verification_code import VerificationCodeDoc
from shared.datetime_utils import utc_now

VERIFICATION_CODES_COLLECTION = "verification-codes"


class VerificationCodeRepository:
    def __init__(self, db) -> None:
        self._col = db[VERIFICATION_CODES_COLLECTION]

    async def upsert(self, email: str, code_hash: str, expires_at: datetime) -> None:
        """Store the pending code for *email*, replacing any earlier one."""
        await self._col.update_one(
            {"email": email},
            {
                "$set": {
                    "code_hash": code_hash,
                    "expires_at": expires_at,
                    "created_at": utc_now(),
                }
            },
            upsert=True,
        )

    async def find_by_email(self, email: str) -> Optional[VerificationCodeDoc]:
        return VerificationCodeDoc.from_mongo(await self._col.find_one({"email": email}))

    async def consume(self, email: str, code_hash: str) -> bool:
        """Delete the matching code. False if another request redeemed it first."""
        deleted = await self._col.find_one_and_delete(
            {"email": email, "code_hash": code_hash}
        )
        return deleted is not None
