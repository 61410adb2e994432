"""Configuration for APB Catalog.

Loaded from environment variables with APB_REGISTRY_ prefix
or from a .env file.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistryType(str, Enum):
    """Supported registry adapters."""

    RHCC = "rhcc"


class LogLevel(str, Enum):
    """Logging level names accepted by the CLI and environment."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class RegistryConfig(BaseSettings):
    """Registry endpoint configuration.

    Consumed read-only by the registry client; the URL may omit its
    scheme, in which case plain HTTP is assumed.
    """

    model_config = SettingsConfigDict(
        env_prefix="APB_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    name: str = Field(
        default="rhcc",
        description="Name used to identify the registry in logs and errors",
    )
    type: RegistryType = Field(
        default=RegistryType.RHCC,
        description="Registry adapter to use",
    )
    url: str = Field(
        default="registry.access.redhat.com",
        description="Registry base URL, with or without scheme",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None blocks indefinitely)",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("registry url must not be empty")
        return value
