from functools import lru_cache
from pathlib import Path
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Sync Relay API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 3000

    # PostgreSQL connection (PG_* variables)
    pg_host: str = "localhost"
    pg_port: int = 5432
    pg_database: str = "sync"
    pg_user: str = "postgres"
    pg_password: str = ""
    pg_ssl: bool = False

    # Full SQLAlchemy URL; overrides the PG_* settings when set
    database_url: str = ""
    database_echo: bool = False
    create_tables_on_startup: bool = True

    # Upper bound for one relay operation, store round-trips included
    request_timeout_seconds: float = 30.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_sync: str = "INFO"             # relay services (auth, replace-sync, logs)

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def resolved_database_url(self) -> str:
        """The explicit ``database_url`` or one assembled from the PG_* settings."""
        if self.database_url:
            return self.database_url
        credentials = quote_plus(self.pg_user)
        if self.pg_password:
            credentials += ":" + quote_plus(self.pg_password)
        return (
            f"postgresql://{credentials}@{self.pg_host}:{self.pg_port}/{self.pg_database}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
