"""Single-use SQLAlchemy sessions against MySQL, PostgreSQL or SQLite."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType

import sqlalchemy as sa
from sqlalchemy import pool
from sqlalchemy.exc import ArgumentError, DBAPIError, SQLAlchemyError

from credential_updater.config.settings import DatabaseSettings
from credential_updater.domain.backend_kind import BackendKind, parse_backend_kind
from credential_updater.domain.errors import BackendConnectionError, StatementExecutionError
from credential_updater.domain.update_statement import UpdateStatement
from credential_updater.infrastructure.db.connection_parameters import (
    build_connect_args,
    build_server_url,
    build_sqlite_url,
    resolve_server_parameters,
    resolve_sqlite_location,
)

logger = logging.getLogger(__name__)


@dataclass
class ActiveConnection:
    """Open connection to exactly one backend, tagged with its kind."""

    kind: BackendKind
    engine: sa.Engine
    connection: sa.Connection

    def execute(self, statement: UpdateStatement) -> int:
        """Apply the bound update statement and return the affected row count."""

        try:
            result = self.connection.execute(sa.text(statement.sql), statement.params)
            rows_affected = result.rowcount
            self.connection.commit()
        except SQLAlchemyError as exc:
            self.connection.rollback()
            raise StatementExecutionError(
                f"failed to execute credential update: {_driver_message(exc)}"
            ) from exc

        logger.info(
            "credential_update_executed backend=%s table=%s column=%s rows_affected=%s",
            self.kind,
            statement.table,
            statement.identifier.column,
            rows_affected,
        )
        return rows_affected

    def close(self) -> None:
        """Close the connection and dispose of its engine."""

        self.connection.close()
        self.engine.dispose()

    def __enter__(self) -> ActiveConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def establish_connection(
    kind: str | BackendKind,
    settings: DatabaseSettings,
) -> ActiveConnection:
    """Open one connection to the selected backend using injected settings."""

    backend = parse_backend_kind(kind)
    match backend:
        case BackendKind.MYSQL | BackendKind.POSTGRES:
            parameters = resolve_server_parameters(settings, kind=backend)
            url = build_server_url(kind=backend, parameters=parameters)
            target = f"{parameters.host}:{parameters.port}/{parameters.database}"
        case BackendKind.SQLITE:
            location = resolve_sqlite_location(settings)
            url = build_sqlite_url(location)
            target = location

    connect_args = build_connect_args(
        kind=backend,
        timeout_seconds=settings.connect_timeout_seconds,
    )
    try:
        engine = sa.create_engine(url, poolclass=pool.NullPool, connect_args=connect_args)
    except ArgumentError as exc:
        # Parse errors echo the URL, which carries the password.
        raise BackendConnectionError(
            f"invalid connection settings for {backend} backend: URL could not be parsed"
        ) from exc
    except SQLAlchemyError as exc:
        raise BackendConnectionError(
            f"invalid connection settings for {backend} backend: {exc}"
        ) from exc
    try:
        connection = engine.connect()
    except SQLAlchemyError as exc:
        engine.dispose()
        raise BackendConnectionError(
            f"failed to connect to {backend} backend: {_driver_message(exc)}"
        ) from exc

    logger.info("backend_connection_established backend=%s target=%s", backend, target)
    return ActiveConnection(kind=backend, engine=engine, connection=connection)


def _driver_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)
