"""Application service that hashes a password and writes it to one user row."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from credential_updater.application.ports.credential_store_port import CredentialStoreConnector
from credential_updater.application.ports.password_hasher_port import PasswordHasherPort
from credential_updater.domain.credentials import validate_new_password
from credential_updater.domain.update_statement import build_update_statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PasswordUpdateRequest:
    """Interactive inputs for one credential update."""

    backend: str
    table: str
    identifier: str
    password: str
    confirmation: str


@dataclass(frozen=True)
class PasswordUpdateResult:
    """Outcome of one applied credential update."""

    rows_affected: int
    column: str
    identifier: str

    @property
    def updated(self) -> bool:
        return self.rows_affected > 0


class PasswordUpdateService:
    """Compose hashing, statement construction and the backend update."""

    def __init__(
        self,
        *,
        password_hasher: PasswordHasherPort,
        connector: CredentialStoreConnector,
    ) -> None:
        self._password_hasher = password_hasher
        self._connector = connector

    def hash_only(self, password: str) -> str:
        """Return the encoded hash without touching any database."""

        validate_new_password(password=password, confirmation=password)
        return self._password_hasher.hash_password(password)

    def update_password(self, request: PasswordUpdateRequest) -> PasswordUpdateResult:
        """Validate, hash and store the new password for one user."""

        password = validate_new_password(
            password=request.password,
            confirmation=request.confirmation,
        )
        password_hash = self._password_hasher.hash_password(password)
        statement = build_update_statement(
            table=request.table,
            password_hash=password_hash,
            identifier=request.identifier,
        )

        store = self._connector(request.backend)
        try:
            rows_affected = store.execute(statement)
        finally:
            store.close()

        if rows_affected == 0:
            logger.info(
                "credential_update_no_match table=%s column=%s",
                statement.table,
                statement.identifier.column,
            )
        return PasswordUpdateResult(
            rows_affected=rows_affected,
            column=statement.identifier.column,
            identifier=statement.identifier.value,
        )
