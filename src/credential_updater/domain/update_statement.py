"""Parameter-bound credential update statement."""

from __future__ import annotations

from dataclasses import dataclass

from credential_updater.domain.credentials import validate_table_name
from credential_updater.domain.user_identifier import UserIdentifier, classify_user_identifier


@dataclass(frozen=True)
class UpdateStatement:
    """Single-row password update addressed by user id or username."""

    table: str
    password_hash: str
    identifier: UserIdentifier

    @property
    def sql(self) -> str:
        """Return backend-agnostic SQL with named placeholders."""

        return (
            f"UPDATE {self.table} SET password = :password_hash "
            f"WHERE {self.identifier.column} = :identifier"
        )

    @property
    def params(self) -> dict[str, str]:
        """Return values bound to the statement placeholders."""

        return {"password_hash": self.password_hash, "identifier": self.identifier.value}

    def preview(self) -> str:
        """Render the statement with quoted literals for display only."""

        return (
            f"UPDATE {self.table} SET password = {_quote_literal(self.password_hash)} "
            f"WHERE {self.identifier.column} = {_quote_literal(self.identifier.value)}"
        )


def build_update_statement(*, table: str, password_hash: str, identifier: str) -> UpdateStatement:
    """Build the update statement for one table, encoded hash and raw identifier."""

    return UpdateStatement(
        table=validate_table_name(table=table),
        password_hash=password_hash,
        identifier=classify_user_identifier(identifier),
    )


def _quote_literal(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"
