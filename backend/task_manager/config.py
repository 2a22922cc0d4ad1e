"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The token-signing secret comes from ACCESS_TOKEN and has no default
    - get_settings() is cached (lru_cache): single instance per process
    - database_url always resolves to an async driver URL

Design Decisions:
    - DATABASE_URL wins; otherwise the URL is composed from DATABASE_USER /
      DATABASE_PASSWORD / DATABASE_HOST / DATABASE_NAME; otherwise a local
      SQLite file is used for development
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_SQLITE_URL = "sqlite+aiosqlite:///./task_manager.db"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str | None = None
    database_user: str | None = None
    database_password: str | None = None
    database_host: str | None = None
    database_name: str = "task_manager"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    @model_validator(mode="after")
    def compose_database_url(self) -> "Settings":
        if self.database_url:
            return self
        if self.database_host and self.database_user:
            self.database_url = URL.create(
                "postgresql+asyncpg",
                username=self.database_user,
                password=self.database_password,
                host=self.database_host,
                database=self.database_name,
            ).render_as_string(hide_password=False)
        else:
            self.database_url = DEFAULT_SQLITE_URL
        return self

    # Auth
    access_token: str
    token_algorithm: str = "HS256"
    token_expire_days: int = 7

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
