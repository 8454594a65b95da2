"""Password hashing algorithm selector."""

from __future__ import annotations

from enum import StrEnum


class HashAlgorithm(StrEnum):
    """Hashing algorithms available for encoding stored passwords."""

    ARGON2 = "argon2"
    BCRYPT = "bcrypt"


DEFAULT_HASH_ALGORITHM = HashAlgorithm.BCRYPT
