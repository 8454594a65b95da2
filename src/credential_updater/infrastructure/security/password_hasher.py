"""Bcrypt and Argon2 password hasher adapters."""

from __future__ import annotations

import argon2
import bcrypt
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from credential_updater.application.ports.password_hasher_port import PasswordHasherPort
from credential_updater.domain.errors import HashError
from credential_updater.domain.hash_algorithm import HashAlgorithm

BCRYPT_DEFAULT_ROUNDS = 12
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST_KIB = 65536
ARGON2_PARALLELISM = 4


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt with a fresh salt per call."""

    def __init__(self, *, rounds: int = BCRYPT_DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        encoded = password.encode("utf-8")
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(encoded, salt).decode("utf-8")
        except ValueError as exc:
            raise HashError(f"bcrypt hashing failed: {exc}") from exc

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False


class Argon2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter using argon2id with a random salt per call.

    Cost parameters default to the RFC 9106 low-memory profile and are
    embedded in the encoded output, so verification never needs them.
    """

    def __init__(
        self,
        *,
        time_cost: int = ARGON2_TIME_COST,
        memory_cost: int = ARGON2_MEMORY_COST_KIB,
        parallelism: int = ARGON2_PARALLELISM,
    ) -> None:
        self._time_cost = time_cost
        self._memory_cost = memory_cost
        self._parallelism = parallelism

    def hash_password(self, password: str) -> str:
        try:
            hasher = argon2.PasswordHasher(
                time_cost=self._time_cost,
                memory_cost=self._memory_cost,
                parallelism=self._parallelism,
            )
            return hasher.hash(password)
        except (HashingError, ValueError) as exc:
            raise HashError(f"argon2 hashing failed: {exc}") from exc

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return argon2.PasswordHasher().verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False


def build_password_hasher(algorithm: HashAlgorithm) -> PasswordHasherPort:
    """Return the hasher adapter for one algorithm."""

    match algorithm:
        case HashAlgorithm.ARGON2:
            return Argon2PasswordHasher()
        case HashAlgorithm.BCRYPT:
            return BcryptPasswordHasher()
