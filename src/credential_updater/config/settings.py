"""Runtime settings loaded from environment variables and an optional `.env` file."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_updater.domain.errors import ConfigurationError

NonNegativeFloat = Annotated[float, Field(ge=0.0)]


class Settings(BaseSettings):
    """Process-level settings for the command-line entrypoint."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")


class DatabaseSettings(BaseSettings):
    """Raw backend connection values.

    Every field is optional at load time: only the backend selected for one run
    has to be fully configured, and that check happens when the connection
    parameters are resolved. Ports stay raw strings for the same reason, so a
    malformed `MYSQL_PORT` does not break a SQLite run.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    mysql_host: str | None = Field(default=None, validation_alias="MYSQL_HOST")
    mysql_db: str | None = Field(default=None, validation_alias="MYSQL_DB")
    mysql_user: str | None = Field(default=None, validation_alias="MYSQL_USER")
    mysql_pass: str | None = Field(default=None, validation_alias="MYSQL_PASS")
    mysql_port: str | None = Field(default=None, validation_alias="MYSQL_PORT")
    postgres_host: str | None = Field(default=None, validation_alias="POSTGRES_HOST")
    postgres_db: str | None = Field(default=None, validation_alias="POSTGRES_DB")
    postgres_user: str | None = Field(default=None, validation_alias="POSTGRES_USER")
    postgres_pass: str | None = Field(default=None, validation_alias="POSTGRES_PASS")
    postgres_port: str | None = Field(default=None, validation_alias="POSTGRES_PORT")
    sqlite_database_url: str | None = Field(default=None, validation_alias="SQLITE_DATABASE_URL")
    connect_timeout_seconds: NonNegativeFloat = Field(
        default=10.0,
        validation_alias="DB_CONNECT_TIMEOUT_SECONDS",
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache process settings."""

    return Settings()


@lru_cache(maxsize=1)
def load_database_settings() -> DatabaseSettings:
    """Load and cache backend connection settings."""

    try:
        return DatabaseSettings()
    except ValidationError as exc:
        names = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise ConfigurationError(f"invalid settings: {names}") from exc
