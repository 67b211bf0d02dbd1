"""Service configuration.

Settings are loaded once at startup into a ``Settings`` object and passed by
reference to whatever needs them (the application factory, the engine, the
test harness). Values come from the process environment first and from the
given env file second: ``.env`` for the running service, ``.int.env`` for
the test suite so tests never touch the production store.
"""
from __future__ import annotations

from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_ENV_FILE: Final = ".env"
TEST_ENV_FILE: Final = ".int.env"

# Used when neither DATABASE_URL nor POSTGRES_HOST is configured
SQLITE_FALLBACK_URL: Final = "sqlite+pysqlite:///./dogs.db"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------- Database ------------------------------- #
    postgres_host: str | None = Field(default=None, description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_user: str | None = Field(default=None, description="PostgreSQL user")
    postgres_password: str | None = Field(default=None, repr=False, description="PostgreSQL password")
    postgres_db: str | None = Field(default=None, description="PostgreSQL database name")

    # Explicit SQLAlchemy URL; wins over the POSTGRES_* values when set
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    # Create missing tables on startup instead of running migrations
    db_synchronize: bool = True
    db_echo: bool = False

    # ------------------------------- Logging -------------------------------- #
    log_level: str = "INFO"
    log_file: str | None = "logs/app.log"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured store."""
        if self.database_url_override:
            return self.database_url_override
        if self.postgres_host:
            return URL.create(
                "postgresql+psycopg",
                username=self.postgres_user,
                password=self.postgres_password,
                host=self.postgres_host,
                port=self.postgres_port,
                database=self.postgres_db,
            ).render_as_string(hide_password=False)
        return SQLITE_FALLBACK_URL

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def load_settings(env_file: str | None = DEFAULT_ENV_FILE) -> Settings:
    """Read settings once from the environment and ``env_file``.

    A missing env file is not an error; the process environment and the
    defaults still apply.
    """
    return Settings(_env_file=env_file)  # type: ignore[call-arg]


__all__ = [
    "Settings",
    "load_settings",
    "DEFAULT_ENV_FILE",
    "TEST_ENV_FILE",
    "SQLITE_FALLBACK_URL",
]
