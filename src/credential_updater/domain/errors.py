"""Error taxonomy for credential hashing and update flows."""

from __future__ import annotations


class CredentialUpdaterError(Exception):
    """Base class for every failure surfaced by the credential updater."""


class ConfigurationError(CredentialUpdaterError, ValueError):
    """Raised when a required settings value is missing or malformed."""


class BackendConnectionError(CredentialUpdaterError, ConnectionError):
    """Raised when a database backend cannot be reached or rejects the session."""


class UnsupportedBackendError(BackendConnectionError):
    """Raised when the backend selector names no supported database engine."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unsupported database type: {kind}")
        self.kind = kind


class HashError(CredentialUpdaterError, RuntimeError):
    """Raised when the password hashing primitive fails."""


class StatementExecutionError(CredentialUpdaterError, RuntimeError):
    """Raised when the backend rejects the credential update statement."""


class CredentialValidationError(CredentialUpdaterError, ValueError):
    """Raised for user-correctable input problems (blank or mismatched passwords)."""
