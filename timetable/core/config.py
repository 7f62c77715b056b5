from typing import Literal

from pydantic import ValidationError, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timetable.domain.shared.exceptions import ConfigMissingError

PSYCOPG_SCHEME = "postgresql+psycopg://"


def normalize_database_url(url: str) -> str:
    """Rewrite plain PostgreSQL URLs to use the psycopg driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", PSYCOPG_SCHEME, 1)
    elif url.startswith("postgres://"):
        return url.replace("postgres://", PSYCOPG_SCHEME, 1)
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "timetable"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    DATABASE_URL: str
    DATABASE_CONNECT_TIMEOUT: int = 10  # seconds

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        return normalize_database_url(self.DATABASE_URL)

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "json" or "console"
    LOG_SQL: bool = False


def load_settings(**overrides: object) -> Settings:
    """
    Load settings from the environment and ``.env``.

    Raises:
        ConfigMissingError: If DATABASE_URL is absent or empty
    """
    try:
        settings = Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        if any(error["loc"] == ("DATABASE_URL",) for error in e.errors()):
            raise ConfigMissingError("DATABASE_URL") from e
        raise
    if not settings.DATABASE_URL:
        raise ConfigMissingError("DATABASE_URL")
    return settings
