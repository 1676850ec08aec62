"""Unit tests for src/core/config.py"""

import logging

import pytest
from pydantic import ValidationError

from src.core.config import (
    DEFAULT_DATABASE_URL,
    Settings,
    configure_logging,
    get_settings,
)

ENV_NAMES = [
    "TICTACTOE_DATABASE_URL",
    "TICTACTOE_DATABASE_ECHO",
    "TICTACTOE_LOG_LEVEL",
    "TICTACTOE_RANDOM_SEED",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings(_env_file=None)
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.database_echo is False
    assert settings.log_level == "INFO"
    assert settings.random_seed is None


def test_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TICTACTOE_DATABASE_URL", "sqlite:///:memory:")
    clean_env.setenv("TICTACTOE_DATABASE_ECHO", "yes")
    clean_env.setenv("TICTACTOE_LOG_LEVEL", "debug")
    clean_env.setenv("TICTACTOE_RANDOM_SEED", "42")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.database_echo is True
    assert settings.log_level == "DEBUG"
    assert settings.random_seed == 42


def test_unprefixed_variables_are_ignored(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("DATABASE_URL", "postgresql://elsewhere")
    assert Settings(_env_file=None).database_url == DEFAULT_DATABASE_URL


def test_invalid_seed(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TICTACTOE_RANDOM_SEED", "not-a-number")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_with_explicit_level() -> None:
    # basicConfig is a no-op once the root logger has handlers (pytest installs its own), so only check it does not fail
    configure_logging("WARNING")
    assert logging.getLogger().handlers
