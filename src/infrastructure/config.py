"""
Runtime configuration, read from the environment and an optional .env file.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Auth
    AUTH_SECRET_KEY: str
    AUTH_TOKEN_TTL_MINUTES: int = 24 * 60

    # Persistence
    AWS_DEFAULT_REGION: str = "us-east-1"
    DASHBOARDS_TABLE: str = "stock-dashboards"
    USERS_TABLE: str = "stock-dashboard-users"
    DYNAMODB_ENDPOINT_URL: str | None = None

    # Market data
    HISTORY_YEARS: int = 11

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
