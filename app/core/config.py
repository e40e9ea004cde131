"""
Application configuration.
Settings are read from environment variables or a local .env file.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    APP_NAME: str = "Price Tracker API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    RELOAD: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Database
    DATABASE_URL: str = "sqlite:///./price_tracker.db"
    DATABASE_ECHO: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True

    # Pricing
    DEFAULT_CURRENCY: str = "TRY"
    CATEGORY_MAX_DEPTH: int = 4

    # Excel import
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE_MB: int = 10
    IMPORT_MAX_ROWS: int = 10000
    IMPORT_MAX_REPORTED_ERRORS: int = 10

    # Keep-alive ping for hosts that sleep idle services (empty = disabled)
    KEEP_ALIVE_URL: str = ""
    KEEP_ALIVE_INTERVAL_SECONDS: int = 300

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def app_version(self) -> str:
        return self.APP_VERSION

    @property
    def debug(self) -> bool:
        return self.DEBUG

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    @property
    def reload(self) -> bool:
        return self.RELOAD

    @property
    def log_format(self) -> str:
        return self.LOG_FORMAT

    @property
    def cors_origins(self) -> List[str]:
        return self.CORS_ORIGINS

    @property
    def cors_allow_credentials(self) -> bool:
        return self.CORS_ALLOW_CREDENTIALS

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
