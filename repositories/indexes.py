"""Index bootstrap, run once from the app lifespan."""

from __future__ import annotations

from pymongo import ASCENDING, DESCENDING

from repositories.booking_repository import BOOKINGS_COLLECTION
from repositories.plan_repository import PLANS_COLLECTION
from repositories.post_repository import POSTS_COLLECTION
from repositories.user_repository import USERS_COLLECTION
from repositories.verification_code_repository import VERIFICATION_CODES_COLLECTION
from shared.logging import get_logger

log = get_logger(__name__)

EXPIRED_CODE_RETENTION_SECONDS = 24 * 3600


async def ensure_indexes(db) -> None:
    await db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)

    codes = db[VERIFICATION_CODES_COLLECTION]
    await codes.create_index([("email", ASCENDING)], unique=True)
    # TTL purge waits a day past expires_at so late verifies still see expired_code
    await codes.create_index(
        [("expires_at", ASCENDING)], expireAfterSeconds=EXPIRED_CODE_RETENTION_SECONDS
    )

    await db[PLANS_COLLECTION].create_index([("price", ASCENDING)])

    await db[BOOKINGS_COLLECTION].create_index(
        [("user_id", ASCENDING), ("created_at", DESCENDING)]
    )

    await db[POSTS_COLLECTION].create_index([("created_at", DESCENDING)])

    log.info("mongo_indexes_ensured")
