"""Security helpers (hashing and verification)."""

from __future__ import annotations

from functools import lru_cache

from argon2 import PasswordHasher, exceptions as argon_exc

from .config import get_settings


@lru_cache
def _hasher() -> PasswordHasher:
    settings = get_settings()
    return PasswordHasher(
        time_cost=settings.password_time_cost,
        memory_cost=settings.password_memory_cost,
    )


def hash_password(password: str) -> str:
    """Create a salted Argon2 hash; two calls never return the same digest."""
    return _hasher().hash(password)


def verify_password(password: str | None, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    try:
        return _hasher().verify(stored_hash, password or "")
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False
