"""Declarative catalog of the server's HTTP operations.

Every remote capability is one Operation: its verb, path template, request
and result types, and an optional defaulting function. The client runs all of
them through the same pipeline:

    defaults -> validate -> encode -> dispatch -> decode

Which fields go to the path, the query string or the body is declared on the
request model itself (see marqo_client.core.fields).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from marqo_client.core.defaults import (
    default_bulk_search,
    default_create_index,
    default_search,
)
from marqo_client.core.fields import BODY, PATH, QUERY, field_meta, wire_name
from marqo_client.models import documents, indexes, search, system


@dataclass(frozen=True)
class Operation:
    """Metadata for one remote capability.

    Attributes:
        name: Operation name used in logs and errors
        method: HTTP verb
        path: Path template, placeholders named after PathParam fields
        request_type: Request model, or None when the call takes no input
        result_type: Decoded result type, or None when success is signalled
            by the status code alone
        defaults: Optional defaulting function applied before validation
    """

    name: str
    method: str
    path: str
    request_type: type[BaseModel] | None = None
    result_type: Any = None
    defaults: Callable[[Any], Any] | None = None

    def _fields(self, location: str) -> tuple[str, ...]:
        if self.request_type is None:
            return ()
        return tuple(
            wire_name(name, info)
            for name, info in self.request_type.model_fields.items()
            if field_meta(info).get("location") == location
        )

    @property
    def path_fields(self) -> tuple[str, ...]:
        return self._fields(PATH)

    @property
    def query_fields(self) -> tuple[str, ...]:
        return self._fields(QUERY)

    @property
    def body_fields(self) -> tuple[str, ...]:
        return self._fields(BODY)


CREATE_INDEX = Operation(
    name="CreateIndex",
    method="POST",
    path="/indexes/{index_name}",
    request_type=indexes.CreateIndexRequest,
    result_type=indexes.CreateIndexResponse,
    defaults=default_create_index,
)
DELETE_INDEX = Operation(
    name="DeleteIndex",
    method="DELETE",
    path="/indexes/{index_name}",
    request_type=indexes.DeleteIndexRequest,
)
LIST_INDEXES = Operation(
    name="ListIndexes",
    method="GET",
    path="/indexes",
    result_type=indexes.ListIndexesResponse,
)
GET_INDEX_HEALTH = Operation(
    name="GetIndexHealth",
    method="GET",
    path="/indexes/{index_name}/health",
    request_type=indexes.GetIndexHealthRequest,
    result_type=indexes.GetIndexHealthResponse,
)
GET_INDEX_SETTINGS = Operation(
    name="GetIndexSettings",
    method="GET",
    path="/indexes/{index_name}/settings",
    request_type=indexes.GetIndexSettingsRequest,
    result_type=indexes.GetIndexSettingsResponse,
)
GET_INDEX_STATS = Operation(
    name="GetIndexStats",
    method="GET",
    path="/indexes/{index_name}/stats",
    request_type=indexes.GetIndexStatsRequest,
    result_type=indexes.GetIndexStatsResponse,
)
REFRESH_INDEX = Operation(
    name="RefreshIndex",
    method="POST",
    path="/indexes/{index_name}/refresh",
    request_type=indexes.RefreshIndexRequest,
    result_type=indexes.RefreshIndexResponse,
)
UPSERT_DOCUMENTS = Operation(
    name="UpsertDocuments",
    method="POST",
    path="/indexes/{index_name}/documents",
    request_type=documents.UpsertDocumentsRequest,
    result_type=documents.UpsertDocumentsResponse,
)
DELETE_DOCUMENTS = Operation(
    name="DeleteDocuments",
    method="POST",
    path="/indexes/{index_name}/documents/delete-batch",
    request_type=documents.DeleteDocumentsRequest,
    result_type=documents.DeleteDocumentsResponse,
)
GET_DOCUMENT = Operation(
    name="GetDocument",
    method="GET",
    path="/indexes/{index_name}/documents/{document_id}",
    request_type=documents.GetDocumentRequest,
    result_type=documents.Document,
)
GET_DOCUMENTS = Operation(
    name="GetDocuments",
    method="GET",
    path="/indexes/{index_name}/documents",
    request_type=documents.GetDocumentsRequest,
    result_type=documents.GetDocumentsResponse,
)
SEARCH = Operation(
    name="Search",
    method="POST",
    path="/indexes/{index_name}/search",
    request_type=search.SearchRequest,
    result_type=search.SearchResponse,
    defaults=default_search,
)
BULK_SEARCH = Operation(
    name="BulkSearch",
    method="POST",
    path="/indexes/bulk/search",
    request_type=search.BulkSearchRequest,
    result_type=search.BulkSearchResponse,
    defaults=default_bulk_search,
)
LIST_MODELS = Operation(
    name="ListModels",
    method="GET",
    path="/models",
    result_type=system.GetModelsResponse,
)
EJECT_MODEL = Operation(
    name="EjectModel",
    method="DELETE",
    path="/models",
    request_type=system.EjectModelRequest,
)
GET_CPU_INFO = Operation(
    name="GetCPUInfo",
    method="GET",
    path="/device/cpu",
    result_type=system.GetCPUInfoResponse,
)
GET_CUDA_INFO = Operation(
    name="GetCUDAInfo",
    method="GET",
    path="/device/cuda",
    result_type=system.GetCUDAInfoResponse,
)

CATALOG: dict[str, Operation] = {
    operation.name: operation
    for operation in (
        CREATE_INDEX,
        DELETE_INDEX,
        LIST_INDEXES,
        GET_INDEX_HEALTH,
        GET_INDEX_SETTINGS,
        GET_INDEX_STATS,
        REFRESH_INDEX,
        UPSERT_DOCUMENTS,
        DELETE_DOCUMENTS,
        GET_DOCUMENT,
        GET_DOCUMENTS,
        SEARCH,
        BULK_SEARCH,
        LIST_MODELS,
        EJECT_MODEL,
        GET_CPU_INFO,
        GET_CUDA_INFO,
    )
}
