"""Unit tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from marqo_client.core.config import DEFAULT_URL, Settings


class TestConfigLoading:
    """Test configuration loading from environment variables."""

    def test_config_loads_from_env(self) -> None:
        """Test that Settings reads every MARQO_ variable."""
        env_vars = {
            "MARQO_URL": "https://marqo.example.com/",
            "MARQO_API_KEY": "secret",
            "MARQO_TIMEOUT": "5.5",
            "MARQO_LOG_LEVEL": "info",
            "MARQO_LOG_FILE": "logs/marqo.log",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

            assert settings.url == "https://marqo.example.com"
            assert settings.api_key == "secret"
            assert settings.timeout == 5.5
            assert settings.log_level == "INFO"
            assert settings.log_file == Path("logs/marqo.log")

    def test_config_defaults(self) -> None:
        """Test defaults when no variable is set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.url == DEFAULT_URL
            assert settings.api_key is None
            assert settings.timeout == 30.0
            assert settings.log_level == "ERROR"
            assert settings.log_file is None


class TestConfigValidation:
    """Test configuration validation rules."""

    @pytest.mark.parametrize("url", ["", "localhost:8882", "ftp://marqo"])
    def test_url_must_be_http(self, url: str) -> None:
        with pytest.raises(ValidationError, match="http or https"):
            Settings(_env_file=None, url=url)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_timeout_must_be_positive(self, timeout: float) -> None:
        with pytest.raises(ValidationError, match="timeout must be positive"):
            Settings(_env_file=None, timeout=timeout)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="CHATTY")
