"""Typed Python client for the Marqo vector search server."""

from marqo_client.client import MarqoClient
from marqo_client.core.config import Settings
from marqo_client.core.errors import (
    DecodeError,
    MarqoError,
    ServerError,
    TransportError,
    ValidationError,
)
from marqo_client.core.validation import RequestValidator
from marqo_client.operations import CATALOG, Operation

__all__ = [
    "CATALOG",
    "DecodeError",
    "MarqoClient",
    "MarqoError",
    "Operation",
    "RequestValidator",
    "ServerError",
    "Settings",
    "TransportError",
    "ValidationError",
]
