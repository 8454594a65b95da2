from pathlib import Path

import pytest
from pydantic import ValidationError

from credential_updater.config.settings import DatabaseSettings, Settings, load_database_settings
from credential_updater.domain.errors import ConfigurationError

DATABASE_ENV_KEYS = (
    "MYSQL_HOST",
    "MYSQL_DB",
    "MYSQL_USER",
    "MYSQL_PASS",
    "MYSQL_PORT",
    "POSTGRES_HOST",
    "POSTGRES_DB",
    "POSTGRES_USER",
    "POSTGRES_PASS",
    "POSTGRES_PORT",
    "SQLITE_DATABASE_URL",
    "DB_CONNECT_TIMEOUT_SECONDS",
)


def _clear_database_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in DATABASE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_database_settings_load_with_no_backend_configured(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _clear_database_env(monkeypatch)

    settings = DatabaseSettings(_env_file=None)

    assert settings.mysql_host is None
    assert settings.postgres_port is None
    assert settings.sqlite_database_url is None
    assert settings.connect_timeout_seconds == 10.0


def test_database_settings_read_backend_values(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_database_env(monkeypatch)
    monkeypatch.setenv("MYSQL_HOST", "db.example.org")
    monkeypatch.setenv("MYSQL_PORT", "3306")
    monkeypatch.setenv("SQLITE_DATABASE_URL", "/var/lib/app/users.db")

    settings = DatabaseSettings(_env_file=None)

    assert settings.mysql_host == "db.example.org"
    assert settings.mysql_port == "3306"
    assert settings.sqlite_database_url == "/var/lib/app/users.db"


def test_malformed_port_does_not_fail_settings_load(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_database_env(monkeypatch)
    monkeypatch.setenv("MYSQL_PORT", "not-a-port")

    settings = DatabaseSettings(_env_file=None)

    assert settings.mysql_port == "not-a-port"


def test_negative_connect_timeout_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _clear_database_env(monkeypatch)
    monkeypatch.setenv("DB_CONNECT_TIMEOUT_SECONDS", "-1")

    with pytest.raises(ValidationError):
        DatabaseSettings(_env_file=None)


def test_database_settings_read_dotenv_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    _clear_database_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("POSTGRES_HOST=pg.internal\nPOSTGRES_PORT=5433\n", encoding="utf-8")

    settings = DatabaseSettings(_env_file=env_file)

    assert settings.postgres_host == "pg.internal"
    assert settings.postgres_port == "5433"


def test_log_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"


@pytest.mark.parametrize("timeout", ["abc", "-1"])
def test_load_database_settings_reports_malformed_value_as_configuration_error(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    timeout: str,
) -> None:
    _clear_database_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DB_CONNECT_TIMEOUT_SECONDS", timeout)
    load_database_settings.cache_clear()

    try:
        with pytest.raises(ConfigurationError, match="DB_CONNECT_TIMEOUT_SECONDS"):
            load_database_settings()
    finally:
        load_database_settings.cache_clear()
