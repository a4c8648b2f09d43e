from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    API_NAME: str = "Todo Service"
    API_SUMMARY: str = "An in-memory task store with stable ids and paginated listing"
    API_VERSION: str = "v0.1.x"

    API_KEY: str | None = None

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = False
    RATE_LIMIT: str = "60/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "todo-service"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    @field_validator("DEFAULT_PAGE_SIZE")
    def validate_default_page_size(cls, v: int):
        if v < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be at least 1")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
