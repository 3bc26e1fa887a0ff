from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Article API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./articles.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Prefix for every route, e.g. "/api" to serve /api/article
    api_prefix: str = ""

    # Number of synthetic articles created by `python -m app.seed`
    seed_count: int = 50

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
