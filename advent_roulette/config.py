"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Build from PG* env vars (common Postgres convention)
      3) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    host = os.getenv("PGHOST")
    user = os.getenv("PGUSER")
    database = os.getenv("PGDATABASE")

    if host and user and database:
        sslmode = os.getenv("PGSSLMODE", "require")
        query = {"sslmode": sslmode} if sslmode else {}
        url = URL.create(
            drivername="postgresql+psycopg2",
            username=user,
            password=os.getenv("PGPASSWORD"),
            host=host,
            port=_env_int("PGPORT", 5432),
            database=database,
            query=query,
        )
        return url.render_as_string(hide_password=False)

    return "sqlite:///./advent.db"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    DATABASE_URL: str = resolve_database_url()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Calendar
    TOTAL_NUMBERS: int = _env_int("TOTAL_NUMBERS", 24)
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "adventRouletteState")

    # Visible to anyone who can read the deployment config. Not a security boundary.
    RESET_SECRET: str = os.getenv("RESET_SECRET", "advent2024")

    # Spin animation (milliseconds)
    SPIN_DURATION_MS: int = _env_int("SPIN_DURATION_MS", 2000)
    SPIN_INITIAL_INTERVAL_MS: int = _env_int("SPIN_INITIAL_INTERVAL_MS", 50)
    SPIN_SLOWDOWN_STEP_MS: int = _env_int("SPIN_SLOWDOWN_STEP_MS", 20)
    SPIN_SLOWDOWN_AFTER: float = _env_float("SPIN_SLOWDOWN_AFTER", 0.7)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
