"""credential-updater command-line entrypoint."""

from typing import Annotated

import typer

from credential_updater.application.services.password_update_service import (
    PasswordUpdateRequest,
    PasswordUpdateService,
)
from credential_updater.config.settings import load_database_settings, load_settings
from credential_updater.domain.backend_kind import BackendKind, parse_backend_kind
from credential_updater.domain.errors import CredentialUpdaterError, CredentialValidationError
from credential_updater.domain.hash_algorithm import DEFAULT_HASH_ALGORITHM, HashAlgorithm
from credential_updater.infrastructure.db.connection import ActiveConnection, establish_connection
from credential_updater.infrastructure.logging import configure_logging
from credential_updater.infrastructure.security.password_hasher import build_password_hasher

APP_NAME = "credential-updater"
APP_VERSION = "1.0.0"
EMPTY_INPUT_MESSAGE = "Input cannot be empty. Please try again."

app = typer.Typer(
    add_completion=False,
    help="Handles passwords for databases or standalone hashing.",
)


def connect_credential_store(kind: str | BackendKind) -> ActiveConnection:
    """Open the selected backend with settings loaded from the environment."""

    backend = parse_backend_kind(kind)
    return establish_connection(backend, load_database_settings())


def build_password_update_service(method: HashAlgorithm) -> PasswordUpdateService:
    """Build the update service for one hashing method."""

    return PasswordUpdateService(
        password_hasher=build_password_hasher(method),
        connector=connect_credential_store,
    )


def prompt_non_empty(message: str) -> str:
    """Prompt until the user enters a non-blank value."""

    while True:
        value = typer.prompt(message, default="", show_default=False).strip()
        if value:
            return value
        typer.echo(EMPTY_INPUT_MESSAGE)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.command()
def run(
    password: Annotated[
        str | None,
        typer.Option("--pass", help="Hashes a password without database interaction."),
    ] = None,
    method: Annotated[
        HashAlgorithm,
        typer.Option("--method", help="Specifies the hashing method.", case_sensitive=False),
    ] = DEFAULT_HASH_ALGORITHM,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Hash a password, or hash one and store it for a user record."""

    configure_logging(level=load_settings().log_level)
    service = build_password_update_service(method)

    try:
        if password is not None:
            typer.echo(f"Hashed Password: {service.hash_only(password)}")
            return
        _run_interactive(service)
    except CredentialValidationError as exc:
        typer.echo(str(exc))
        raise typer.Exit(1) from exc
    except CredentialUpdaterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _run_interactive(service: PasswordUpdateService) -> None:
    typer.echo("Password Hasher CLI")
    backend = prompt_non_empty("Enter database type (mysql, postgres, sqlite)")
    table = prompt_non_empty("Enter table name")
    identifier = prompt_non_empty("Enter user ID or username to change password")
    new_password = typer.prompt(
        "Please enter a password to hash (input will be hidden)",
        default="",
        show_default=False,
        hide_input=True,
    )
    confirmation = typer.prompt(
        "Please confirm your password",
        default="",
        show_default=False,
        hide_input=True,
    )

    result = service.update_password(
        PasswordUpdateRequest(
            backend=backend,
            table=table,
            identifier=identifier,
            password=new_password,
            confirmation=confirmation,
        )
    )
    if not result.updated:
        typer.echo(
            f"No user matched {result.column} = {result.identifier}; nothing was updated.",
            err=True,
        )
        raise typer.Exit(1)
    typer.echo("Password updated successfully.")


def main() -> None:
    """Run the credential-updater command."""

    app()


if __name__ == "__main__":
    main()
