"""Password hashing helpers for seeded user accounts."""

from __future__ import annotations

import warnings

# argon2-cffi exposes a deprecated attribute that passlib touches on import
warnings.filterwarnings("ignore", category=DeprecationWarning, message=r".*argon2.*")

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


__all__ = ["pwd_context", "get_password_hash"]
