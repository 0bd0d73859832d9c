import logging
import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

ENV_FILE = ".env"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "feedback"
    SSL_MODE: str = "disable"

    # Takes precedence over the DB_* parts when set.
    DATABASE_URL: Optional[str] = None

    # Permissive by default; tighten per deployment.
    CORS_ENABLED: bool = True
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: str = "GET, POST, PUT, DELETE, OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"sslmode": self.SSL_MODE} if self.SSL_MODE else {},
        )
        return url.render_as_string(hide_password=False)


def warn_if_env_file_missing(path: str = ENV_FILE) -> bool:
    """
    Log a warning when the optional env file is absent.

    Returns True if the file exists.
    """
    if os.path.isfile(path):
        return True
    logger.warning("%s file not found, using environment and defaults", path)
    return False


settings = Settings()
