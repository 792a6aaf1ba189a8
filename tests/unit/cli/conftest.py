"""Fixtures for CLI command tests."""

import logging
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from tests.fixtures.marqo_responses import BASE_URL

CLI_ENV = {"MARQO_URL": BASE_URL, "MARQO_LOG_LEVEL": "CRITICAL", "COLUMNS": "200"}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env=CLI_ENV)


@pytest.fixture(autouse=True)
def reset_client_logger() -> Iterator[None]:
    """Drop handlers bound to the runner's captured streams."""
    yield
    logger = logging.getLogger("marqo_client")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
