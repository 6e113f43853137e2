"""Primitive settings read from environment variables and .env files."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files.

    These take precedence over the matching values in config.yaml.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    config_file: str = Field(default="config.yaml", validation_alias="CATALOG_CONFIG_FILE")
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
