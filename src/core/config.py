"""
Configuration loaded from environment variables (or a .env file), all prefixed with TICTACTOE_.

- TICTACTOE_DATABASE_URL: SQLAlchemy URL for the game store.
- TICTACTOE_DATABASE_ECHO: echo SQL statements.
- TICTACTOE_LOG_LEVEL: root log level name.
- TICTACTOE_RANDOM_SEED: seed for the coin flip deciding the first joiner's symbol.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///./tictactoe.db"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICTACTOE_", env_file=".env", extra="ignore"
    )

    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    log_level: str = "INFO"
    random_seed: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up the root handler. Falls back to the configured level."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
