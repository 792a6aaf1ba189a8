"""Configuration module for the Marqo client.

Provides Pydantic-based configuration management with environment variable
support and field validation. All variables use the MARQO_ prefix and may
also be read from a local .env file.

Example:
    >>> from marqo_client.core.config import Settings
    >>> settings = Settings(url="http://localhost:8882")
    >>> print(settings.timeout)
    30.0
"""

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "http://localhost:8882"


class Settings(BaseSettings):
    """Marqo client configuration.

    Attributes:
        url: Base URL of the Marqo server
        api_key: Optional API key, sent as the x-api-key header
        timeout: HTTP request timeout in seconds
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating log file

    Raises:
        ValidationError: If a value is invalid

    Example:
        >>> settings = Settings(url="http://marqo:8882", api_key="secret")
        >>> settings.api_key
        'secret'
    """

    url: str = DEFAULT_URL
    api_key: str | None = None
    timeout: float = 30.0

    # Logging
    log_level: str = "ERROR"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="MARQO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls: type["Settings"], v: str) -> str:
        """Validate the server URL is an http(s) URL.

        Args:
            cls: The Settings class (provided by Pydantic)
            v: Server URL

        Returns:
            URL without a trailing slash

        Raises:
            ValueError: If the URL is empty or not http(s)
        """
        if not v or not v.startswith(("http://", "https://")):
            raise ValueError("url must be an http or https URL")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls: type["Settings"], v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls: type["Settings"], v: str) -> str:
        """Validate log_level names a standard logging level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
