"""Resolve per-backend connection parameters and assemble SQLAlchemy URLs."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from credential_updater.config.settings import DatabaseSettings
from credential_updater.domain.backend_kind import BackendKind
from credential_updater.domain.errors import ConfigurationError

_PORT_PATTERN = re.compile(r"[0-9]+")
_MAX_PORT = 65535
_SERVER_SCHEMES: dict[BackendKind, str] = {
    BackendKind.MYSQL: "mysql+pymysql",
    BackendKind.POSTGRES: "postgresql+psycopg",
}
_SQLITE_SCHEME = "sqlite+pysqlite"
_SQLITE_URL_PATTERN = re.compile(r"sqlite(\+\w+)?://")


@dataclass(frozen=True)
class ConnectionParameters:
    """Fully resolved network connection values for one server backend."""

    host: str
    database: str
    user: str
    password: str
    port: int

    def __repr__(self) -> str:
        return (
            f"ConnectionParameters(host={self.host!r}, database={self.database!r}, "
            f"user={self.user!r}, password='***', port={self.port})"
        )


def resolve_server_parameters(
    settings: DatabaseSettings,
    *,
    kind: BackendKind,
) -> ConnectionParameters:
    """Resolve host/db/user/pass/port for MySQL or PostgreSQL, failing on gaps."""

    if kind not in _SERVER_SCHEMES:
        raise ValueError(f"{kind} is not a server backend")

    prefix = kind.value
    env_prefix = prefix.upper()
    host = getattr(settings, f"{prefix}_host")
    database = getattr(settings, f"{prefix}_db")
    user = getattr(settings, f"{prefix}_user")
    password = getattr(settings, f"{prefix}_pass")
    raw_port = getattr(settings, f"{prefix}_port")

    missing = [
        f"{env_prefix}_{suffix}"
        for suffix, value in (("HOST", host), ("DB", database), ("USER", user), ("PORT", raw_port))
        if value is None or not value.strip()
    ]
    if password is None:
        missing.append(f"{env_prefix}_PASS")
    if missing:
        raise ConfigurationError(f"missing required settings: {', '.join(missing)}")

    return ConnectionParameters(
        host=host.strip(),
        database=database.strip(),
        user=user.strip(),
        password=password,
        port=_parse_port(raw_port, name=f"{env_prefix}_PORT"),
    )


def resolve_sqlite_location(settings: DatabaseSettings) -> str:
    """Return the configured SQLite file path or URI."""

    location = settings.sqlite_database_url
    if location is None or not location.strip():
        raise ConfigurationError("missing required settings: SQLITE_DATABASE_URL")
    return location.strip()


def build_server_url(*, kind: BackendKind, parameters: ConnectionParameters) -> str:
    """Assemble `<scheme>://user:password@host:port/database` with encoded credentials."""

    scheme = _SERVER_SCHEMES[kind]
    user = quote(parameters.user, safe="")
    password = quote(parameters.password, safe="")
    host = parameters.host
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    return f"{scheme}://{user}:{password}@{host}:{parameters.port}/{parameters.database}"


def build_sqlite_url(location: str) -> str:
    """Turn a SQLite path, `file:` URI or SQLAlchemy URL into a SQLAlchemy URL."""

    if _SQLITE_URL_PATTERN.match(location):
        return location
    if location.startswith("file:"):
        separator = "&" if "?" in location else "?"
        return f"{_SQLITE_SCHEME}:///{location}{separator}uri=true"
    return f"{_SQLITE_SCHEME}:///{location}"


def build_connect_args(*, kind: BackendKind, timeout_seconds: float) -> dict[str, Any]:
    """Return driver keyword arguments that bound connection wait time."""

    if timeout_seconds <= 0:
        return {}
    match kind:
        case BackendKind.MYSQL | BackendKind.POSTGRES:
            return {"connect_timeout": max(1, math.ceil(timeout_seconds))}
        case BackendKind.SQLITE:
            return {"timeout": timeout_seconds}


def _parse_port(raw_port: str, *, name: str) -> int:
    normalized = raw_port.strip()
    if not _PORT_PATTERN.fullmatch(normalized):
        raise ConfigurationError(f"{name} must be a number between 0 and {_MAX_PORT}")
    port = int(normalized)
    if port > _MAX_PORT:
        raise ConfigurationError(f"{name} must be a number between 0 and {_MAX_PORT}")
    return port
