"""Validation helpers for interactively collected credentials."""

from __future__ import annotations

import re

from credential_updater.domain.errors import CredentialValidationError

PASSWORD_MISMATCH_MESSAGE = "Passwords do not match. Please try again."
EMPTY_PASSWORD_MESSAGE = "No password entered."

_TABLE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_$]*(\.[A-Za-z_][A-Za-z0-9_$]*)?")


def validate_new_password(*, password: str, confirmation: str) -> str:
    """Return the password when confirmation matches and it is non-empty."""

    if password != confirmation:
        raise CredentialValidationError(PASSWORD_MISMATCH_MESSAGE)
    if not password:
        raise CredentialValidationError(EMPTY_PASSWORD_MESSAGE)
    return password


def validate_table_name(*, table: str) -> str:
    """Return a plain, optionally schema-qualified, SQL table name."""

    normalized = table.strip()
    if not _TABLE_NAME_PATTERN.fullmatch(normalized):
        raise CredentialValidationError(f"invalid table name: {table!r}")
    return normalized
