"""Supported database backends."""

from __future__ import annotations

from enum import StrEnum

from credential_updater.domain.errors import UnsupportedBackendError


class BackendKind(StrEnum):
    """Closed set of relational engines the credential store can target."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"


def parse_backend_kind(value: str | BackendKind) -> BackendKind:
    """Return the backend for one selector or raise `UnsupportedBackendError`."""

    if isinstance(value, BackendKind):
        return value
    try:
        return BackendKind(value.strip().lower())
    except ValueError as exc:
        raise UnsupportedBackendError(value) from exc
