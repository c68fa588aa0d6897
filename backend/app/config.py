"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables or the default AWS chain (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - dynamodb_endpoint_url is optional: unset means the regional AWS endpoint,
      set means DynamoDB Local or a moto server
    - Table creation is opt-in (dynamodb_create_table), off by default
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # DynamoDB
    dynamodb_table_name: str = "UserTable"
    dynamodb_endpoint_url: str | None = None
    dynamodb_create_table: bool = False
    dynamodb_read_capacity: int = 1
    dynamodb_write_capacity: int = 1
    dynamodb_connect_timeout: int = 5
    dynamodb_read_timeout: int = 10
    dynamodb_max_attempts: int = 3

    @field_validator("dynamodb_endpoint_url", mode="before")
    @classmethod
    def blank_endpoint_is_none(cls, v: str | None) -> str | None:
        """docker-compose passes empty strings for unset variables."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # AWS
    aws_region: str = "ap-northeast-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
