"""Configuration management using pydantic-settings."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/recordtime.db"

    # Level name passed to logging.basicConfig (e.g. DEBUG, INFO)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the standard format.

    Args:
        level: Level name; defaults to settings.log_level
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT
    )
