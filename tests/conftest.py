"""Shared pytest fixtures for the Marqo client tests.

All HTTP traffic is mocked with respx; no Marqo server is needed.
"""

import logging
from collections.abc import Iterator

import pytest
import respx

from marqo_client import MarqoClient
from tests.fixtures.marqo_responses import BASE_URL


@pytest.fixture
def mocked_api() -> Iterator[respx.MockRouter]:
    """Mock every request sent to BASE_URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client_logger() -> logging.Logger:
    """Plain logger that propagates to caplog."""
    logger = logging.getLogger("marqo_client.tests")
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def client(client_logger: logging.Logger) -> Iterator[MarqoClient]:
    """Client pointed at the mocked server."""
    with MarqoClient(BASE_URL, logger=client_logger) as marqo:
        yield marqo
