"""
Application configuration from environment variables.
Loads .env from the backend directory so the database URL is found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Paging bounds for the question index. Values outside are reset, not rejected.
_DEFAULT_PAGE_SIZE = 25
_MAX_PAGE_SIZE = 100

# .env next to backend/ (parent of app/); load explicitly so it applies even when run from repo root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)
else:
    # Fallback: try backend/.env relative to cwd (e.g. when running from repo root)
    import os
    _cwd_env = Path(os.getcwd()) / "backend" / ".env"
    if _cwd_env.exists():
        from dotenv import load_dotenv
        load_dotenv(_cwd_env, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pre-populated trivia database (seeded out of band). Any SQLAlchemy URL works.
    database_url: str = "sqlite:///./opentdb-app.sqlite"

    # Environment label (development | production); only used for startup logging.
    env: str = ""

    # Log every SQL statement (SQLAlchemy echo). Useful to confirm one fetch per page.
    sql_echo: bool = False

    default_page_size: int = _DEFAULT_PAGE_SIZE
    max_page_size: int = _MAX_PAGE_SIZE

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000"

    debug: bool = False

    @field_validator("max_page_size")
    @classmethod
    def _max_page_size_range(cls, v: int) -> int:
        # Env may lower the cap, never raise it
        return v if 1 <= v <= _MAX_PAGE_SIZE else _MAX_PAGE_SIZE

    @model_validator(mode="after")
    def _default_within_max(self) -> "Settings":
        if not 1 <= self.default_page_size <= self.max_page_size:
            self.default_page_size = min(_DEFAULT_PAGE_SIZE, self.max_page_size)
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
