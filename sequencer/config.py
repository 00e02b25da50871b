"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_host: str = "localhost"
    database_port: int = 5432
    database_username: str = "vapor"
    database_password: str = "password"
    database_name: str = "vapor"

    # Full URL override, e.g. for a managed database or local sqlite
    database_url_override: str | None = Field(default=None, validation_alias="DATABASE_URL")

    # Application
    debug: bool = False
    log_level: str = "info"
    host: str = "0.0.0.0"
    port: int = 8080

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the configured database."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            "postgresql+asyncpg",
            username=self.database_username,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Read settings once per process."""
    return Settings()
