"""
Core configuration module for the GrowPanel MCP server.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the GROWPANEL_ prefix
(and from a local .env file when present).

Configuration is read once at startup; the upstream base URL, the bearer
credential and the listen port are the only values the protocol layer needs.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

DEFAULT_API_URL = "https://api.growpanel.io"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the GROWPANEL_ prefix for environment variables.
    Example: GROWPANEL_API_TOKEN=secret

    The listen port also honours the bare PORT variable used by most
    hosting platforms.
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="growpanel-mcp",
        description="Name of the service for logging and identification",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("GROWPANEL_PORT", "PORT"),
        description="Port the service listens on",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    cors_origins: str = Field(
        default="",
        description="Comma-separated allowed origins outside development",
    )

    # =========================================================================
    # Upstream GrowPanel API
    # SecretStr masks the token in logs/repr, use .get_secret_value() to access
    # =========================================================================
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the GrowPanel reports API",
    )
    api_token: SecretStr = Field(
        default=SecretStr(""),
        description="Bearer token for the GrowPanel reports API",
    )

    # =========================================================================
    # Streaming Transport
    # =========================================================================
    sse_ping_interval_seconds: float = Field(
        default=15.0,
        gt=0.0,
        le=300.0,
        description="Seconds between keep-alive comments on idle event streams",
    )

    model_config = {
        "env_prefix": "GROWPANEL_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate the upstream URL scheme and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_cors_origins(self) -> list[str]:
        """
        Get CORS allowed origins based on environment.

        - Development: Allow all origins (["*"])
        - Staging/Production: Use GROWPANEL_CORS_ORIGINS (comma-separated)
        - If not configured outside development: Empty list
        """
        if self.environment == "development":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
