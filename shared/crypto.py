"""
Hashing for sign-in codes.

Only the SHA-256 hex digest of a code is written to MongoDB; verification
re-hashes the submitted code and compares digests.
"""

from __future__ import annotations

import hashlib
import hmac


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def token_matches(token: str, token_hash: str) -> bool:
    """True when ``hash_token(token)`` equals *token_hash*, compared in constant time."""
    return hmac.compare_digest(hash_token(token), token_hash)
