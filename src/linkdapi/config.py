# ABOUTME: Configuration module for client and application settings.
# ABOUTME: Uses pydantic-settings for environment overrides and a frozen model for client config.

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://linkdapi.com"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 1000

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error into a single readable message."""
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        message = str(detail["msg"]).removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages)


class ClientConfig(BaseModel):
    """Immutable configuration owned by a single LinkdAPI client."""

    model_config = ConfigDict(frozen=True)

    api_key: Annotated[str, Field(description="LinkdAPI authentication key")]

    base_url: Annotated[str, Field(description="Base URL of the API")] = DEFAULT_BASE_URL

    timeout_ms: Annotated[int, Field(description="Per-attempt timeout in milliseconds", gt=0)] = (
        DEFAULT_TIMEOUT_MS
    )

    max_retries: Annotated[int, Field(description="Retries after the first attempt", ge=0)] = (
        DEFAULT_MAX_RETRIES
    )

    retry_delay_ms: Annotated[
        int, Field(description="Base delay between retries in milliseconds", gt=0)
    ] = DEFAULT_RETRY_DELAY_MS

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("API key is required")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or DEFAULT_BASE_URL

    @property
    def timeout_seconds(self) -> float:
        """Return the per-attempt timeout in seconds."""
        return self.timeout_ms / 1000


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    LINKDAPI_ prefix (e.g., LINKDAPI_API_KEY, LINKDAPI_TIMEOUT_MS).
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKDAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: Annotated[str | None, Field(description="LinkdAPI authentication key")] = None

    base_url: Annotated[str, Field(description="Base URL of the API")] = DEFAULT_BASE_URL

    timeout_ms: Annotated[int, Field(description="Per-attempt timeout in milliseconds", gt=0)] = (
        DEFAULT_TIMEOUT_MS
    )

    max_retries: Annotated[int, Field(description="Retries after the first attempt", ge=0)] = (
        DEFAULT_MAX_RETRIES
    )

    retry_delay_ms: Annotated[
        int, Field(description="Base delay between retries in milliseconds", gt=0)
    ] = DEFAULT_RETRY_DELAY_MS

    accounts_file: Annotated[Path, Field(description="Path to stored key accounts JSON file")] = (
        Path.home() / ".linkdapi" / "accounts.json"
    )

    log_level: Annotated[LogLevel, Field(description="Logging level for the CLI")] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def to_client_config(self, api_key: str | None = None) -> ClientConfig:
        """Build a ClientConfig from these settings.

        Args:
            api_key: Key to use instead of the configured one.

        Returns:
            A frozen ClientConfig.

        Raises:
            pydantic.ValidationError: If no usable API key is available.
        """
        return ClientConfig(
            api_key=api_key if api_key is not None else (self.api_key or ""),
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            max_retries=self.max_retries,
            retry_delay_ms=self.retry_delay_ms,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()
