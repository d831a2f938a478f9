"""Password hashing helpers for seeded users."""

from __future__ import annotations

import logging
import os
from typing import Optional

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# bcrypt cost factor; tune through the environment without a code change
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def make_password_context(rounds: Optional[int] = None) -> CryptContext:
    """Return the shared context, or a copy of it using `rounds` as the bcrypt cost."""
    if rounds is None or rounds == BCRYPT_ROUNDS:
        return pwd_context
    logger.debug("Using bcrypt cost factor %d", rounds)
    return pwd_context.copy(bcrypt__rounds=rounds)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str, context: Optional[CryptContext] = None) -> str:
    return (context or pwd_context).hash(password)


__all__ = [
    "BCRYPT_ROUNDS",
    "pwd_context",
    "make_password_context",
    "verify_password",
    "get_password_hash",
]
