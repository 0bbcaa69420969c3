"""
Core configuration module for the Cloze MCP server.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CLOZE_ prefix,
so the API key is read from CLOZE_API_KEY.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

from cloze_mcp.core.exceptions import MissingCredentialError


DEFAULT_BASE_URL = "https://api.cloze.com"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the CLOZE_ prefix for environment variables.
    Example: CLOZE_TIMEOUT_SECONDS=10
    """

    # =========================================================================
    # Server Identity
    # =========================================================================
    server_name: str = Field(
        default="cloze-mcp",
        description="Name the MCP server reports during initialization",
    )
    server_version: str = Field(
        default="0.1.0",
        description="Version the MCP server reports during initialization",
    )

    # =========================================================================
    # Cloze API
    # SecretStr masks the key in logs/repr, use .get_secret_value() to access
    # =========================================================================
    api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Cloze API key, sent as the api_key query parameter",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Cloze REST API",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Timeout in seconds for each Cloze API call",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum log level written to stderr",
    )

    model_config = {
        "env_prefix": "CLOZE_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL scheme and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    def require_api_key(self) -> str:
        """
        Return the API key, failing if it is not configured.

        Returns:
            The plain-text API key.

        Raises:
            MissingCredentialError: If CLOZE_API_KEY is unset or blank.
        """
        key = self.api_key.get_secret_value().strip()
        if not key:
            raise MissingCredentialError("CLOZE_API_KEY")
        return key


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
