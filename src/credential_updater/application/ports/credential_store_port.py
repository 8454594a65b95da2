"""Ports for establishing a backend session and applying one update."""

from __future__ import annotations

from typing import Protocol

from credential_updater.domain.backend_kind import BackendKind
from credential_updater.domain.update_statement import UpdateStatement


class CredentialStorePort(Protocol):
    """One open backend session able to apply a credential update."""

    kind: BackendKind

    def execute(self, statement: UpdateStatement) -> int:
        """Apply the statement and return the number of rows modified."""

    def close(self) -> None:
        """Release the underlying session."""


class CredentialStoreConnector(Protocol):
    """Factory that opens a credential store for one backend selector."""

    def __call__(self, kind: str | BackendKind) -> CredentialStorePort:
        """Open a session against the selected backend."""
