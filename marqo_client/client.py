"""Synchronous client for the Marqo vector search server.

Each public method maps to one catalog operation and performs exactly one
HTTP round trip. All of them share a single pipeline: defaults are applied,
the request is validated, encoded, sent, and the response decoded into a
typed result. Every call emits one log record describing its outcome.

Example:
    >>> from marqo_client import MarqoClient
    >>> from marqo_client.models import CreateIndexRequest, SearchRequest
    >>> with MarqoClient("http://localhost:8882") as client:
    ...     client.create_index(CreateIndexRequest(index_name="docs"))
    ...     results = client.search(SearchRequest(index_name="docs", q="hello"))
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel

from marqo_client import operations
from marqo_client.core.config import Settings
from marqo_client.core.dispatch import Dispatcher
from marqo_client.core.encoding import RequestEncoder
from marqo_client.core.errors import MarqoError, ServerError, ValidationError
from marqo_client.core.logger import get_logger
from marqo_client.core.validation import RequestValidator
from marqo_client.models.documents import (
    DeleteDocumentsRequest,
    DeleteDocumentsResponse,
    Document,
    GetDocumentRequest,
    GetDocumentsRequest,
    GetDocumentsResponse,
    UpsertDocumentsRequest,
    UpsertDocumentsResponse,
)
from marqo_client.models.indexes import (
    CreateIndexRequest,
    CreateIndexResponse,
    DeleteIndexRequest,
    GetIndexHealthRequest,
    GetIndexHealthResponse,
    GetIndexSettingsRequest,
    GetIndexSettingsResponse,
    GetIndexStatsRequest,
    GetIndexStatsResponse,
    ListIndexesResponse,
    RefreshIndexRequest,
    RefreshIndexResponse,
)
from marqo_client.models.search import (
    BulkSearchRequest,
    BulkSearchResponse,
    SearchRequest,
    SearchResponse,
)
from marqo_client.models.system import (
    EjectModelRequest,
    GetCPUInfoResponse,
    GetCUDAInfoResponse,
    GetModelsResponse,
)
from marqo_client.operations import Operation

LOGGER_NAME = "marqo_client"


def _default_logger() -> logging.Logger:
    """Return the shared client logger, configuring it only on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    return get_logger(LOGGER_NAME)


class MarqoClient:
    """Client for the Marqo HTTP API.

    The client is immutable after construction, so one instance can be
    shared by several threads.

    Args:
        url: Base URL of the Marqo server (required)
        api_key: API key for Marqo Cloud, sent as the x-api-key header
        logger: Logger to use; defaults to the shared "marqo_client" logger,
            configured at ERROR level if nothing configured it before
        http_client: Transport to use. When omitted the client creates and
            owns an httpx.Client with the given timeout.
        timeout: Request timeout in seconds for the owned transport
        validator: Request validator; defaults to RequestValidator()

    Raises:
        ValidationError: If url is empty
    """

    def __init__(
        self,
        url: str,
        *,
        api_key: str | None = None,
        logger: logging.Logger | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
        validator: RequestValidator | None = None,
    ) -> None:
        if not url:
            raise ValidationError("url cannot be empty", fields=["url"])

        self._url = url.rstrip("/")
        self._logger = logger or _default_logger()
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout)
        self._validator = validator or RequestValidator()
        self._encoder = RequestEncoder()
        self._dispatcher = Dispatcher(self._http_client, self._url, api_key=api_key)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> MarqoClient:
        """Build a client from Settings (MARQO_* environment variables).

        The shared "marqo_client" logger is reconfigured only when its current
        level or log file differ from the settings.

        Args:
            settings: Settings to use; loaded from the environment when omitted
            http_client: Optional transport to inject

        Returns:
            Configured MarqoClient
        """
        settings = settings or Settings()
        return cls(
            settings.url,
            api_key=settings.api_key,
            logger=get_logger(
                LOGGER_NAME,
                log_level=settings.log_level,
                log_file=settings.log_file,
            ),
            http_client=http_client,
            timeout=settings.timeout,
        )

    @property
    def url(self) -> str:
        return self._url

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> MarqoClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _execute(self, operation: Operation, request: BaseModel | None = None) -> Any:
        """Run one operation through the request pipeline.

        Args:
            operation: Catalog entry to execute
            request: Request model, or None for operations without input

        Returns:
            Decoded result of the operation

        Raises:
            ValidationError: If the request is invalid (no I/O performed)
            TransportError: If the HTTP request could not be completed
            ServerError: If the server returned a non-2xx status
            DecodeError: If the response body has an unexpected shape
        """
        try:
            if request is not None and operation.defaults is not None:
                request = operation.defaults(request)
            self._validator.validate(request, operation=operation.name)
            encoded = self._encoder.encode(operation, request)
            result = self._dispatcher.send(operation, encoded)
        except MarqoError as e:
            extra: dict[str, Any] = {
                "operation": operation.name,
                "outcome": "error",
                "error": str(e),
            }
            if isinstance(e, ServerError):
                extra["status_code"] = e.status_code
            self._logger.error(f"{operation.name} failed: {e}", extra=extra)
            raise

        self._logger.info(
            f"{operation.name} succeeded",
            extra={"operation": operation.name, "outcome": "success"},
        )
        return result

    # Indexes

    def create_index(self, request: CreateIndexRequest) -> CreateIndexResponse:
        """Create an index.

        Unset settings are filled with defaults before the request is sent
        (3 shards, 0 replicas, normalized embeddings, ...).
        """
        return self._execute(operations.CREATE_INDEX, request)

    def delete_index(self, request: DeleteIndexRequest | str) -> None:
        """Delete an index. Accepts a request or a bare index name."""
        if isinstance(request, str):
            request = DeleteIndexRequest(index_name=request)
        self._execute(operations.DELETE_INDEX, request)

    def list_indexes(self) -> ListIndexesResponse:
        return self._execute(operations.LIST_INDEXES)

    def get_index_health(self, request: GetIndexHealthRequest) -> GetIndexHealthResponse:
        return self._execute(operations.GET_INDEX_HEALTH, request)

    def get_index_settings(
        self, request: GetIndexSettingsRequest
    ) -> GetIndexSettingsResponse:
        return self._execute(operations.GET_INDEX_SETTINGS, request)

    def get_index_stats(self, request: GetIndexStatsRequest) -> GetIndexStatsResponse:
        return self._execute(operations.GET_INDEX_STATS, request)

    def refresh_index(self, request: RefreshIndexRequest) -> RefreshIndexResponse:
        """Make recently written documents visible to search."""
        return self._execute(operations.REFRESH_INDEX, request)

    # Documents

    def upsert_documents(self, request: UpsertDocumentsRequest) -> UpsertDocumentsResponse:
        """Add or replace documents.

        The response reports per-document status; a 2xx response can still
        contain failed items, flagged by response.errors.
        """
        return self._execute(operations.UPSERT_DOCUMENTS, request)

    def delete_documents(self, request: DeleteDocumentsRequest) -> DeleteDocumentsResponse:
        return self._execute(operations.DELETE_DOCUMENTS, request)

    def get_document(self, request: GetDocumentRequest) -> Document:
        return self._execute(operations.GET_DOCUMENT, request)

    def get_documents(self, request: GetDocumentsRequest) -> GetDocumentsResponse:
        return self._execute(operations.GET_DOCUMENTS, request)

    # Search

    def search(self, request: SearchRequest) -> SearchResponse:
        """Search an index.

        Defaults: limit 20, offset 0, highlights on, TENSOR search. For
        HYBRID search with hybrid_parameters, rrf ranking and disjunction
        retrieval are used unless set.
        """
        return self._execute(operations.SEARCH, request)

    def bulk_search(self, request: BulkSearchRequest) -> BulkSearchResponse:
        """Run several searches in one call; each query is defaulted alone."""
        return self._execute(operations.BULK_SEARCH, request)

    # Models and devices

    def list_models(self) -> GetModelsResponse:
        """Return the models loaded in the server's cache."""
        return self._execute(operations.LIST_MODELS)

    def eject_model(self, request: EjectModelRequest) -> None:
        """Remove a model from the server's cache."""
        self._execute(operations.EJECT_MODEL, request)

    def get_cpu_info(self) -> GetCPUInfoResponse:
        return self._execute(operations.GET_CPU_INFO)

    def get_cuda_info(self) -> GetCUDAInfoResponse:
        return self._execute(operations.GET_CUDA_INFO)
