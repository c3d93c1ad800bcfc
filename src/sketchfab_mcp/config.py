"""Configuration management for the Sketchfab MCP server."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.sketchfab.com/v3"


class SketchfabConfig(BaseSettings):
    """
    Configuration for the Sketchfab MCP server.

    Resolved once at startup and shared read-only by every tool handler.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKETCHFAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Sketchfab API token. Can be set via --api-key or SKETCHFAB_API_KEY.",
    )

    api_base: str = Field(default=DEFAULT_API_BASE, description="Sketchfab REST API base URL")

    request_timeout: float = Field(
        default=30.0, description="Timeout in seconds for search and model metadata calls"
    )

    download_timeout: float = Field(
        default=300.0, description="Timeout in seconds for fetching a model archive"  # 5 minutes
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace-only key as not configured."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        return v.upper()

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None


def load_config(api_key: Optional[str] = None, log_level: Optional[str] = None) -> SketchfabConfig:
    """
    Load configuration from command-line overrides, environment and .env file.

    Args:
        api_key: Key passed on the command line; wins over SKETCHFAB_API_KEY
        log_level: Log level passed on the command line

    Returns:
        Immutable configuration instance
    """
    overrides = {}
    if api_key:
        overrides["api_key"] = api_key
    if log_level:
        overrides["log_level"] = log_level
    return SketchfabConfig(**overrides)
