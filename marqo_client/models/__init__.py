"""Typed request and response models for the Marqo HTTP API."""

from marqo_client.models.documents import (
    DeleteDocumentsRequest,
    DeleteDocumentsResponse,
    Document,
    GetDocumentRequest,
    GetDocumentsRequest,
    GetDocumentsResponse,
    UpsertDocumentsRequest,
    UpsertDocumentsResponse,
    UpsertItem,
)
from marqo_client.models.indexes import (
    ANNParameters,
    CreateIndexRequest,
    CreateIndexResponse,
    DeleteIndexRequest,
    GetIndexHealthRequest,
    GetIndexHealthResponse,
    GetIndexSettingsRequest,
    GetIndexSettingsResponse,
    GetIndexStatsRequest,
    GetIndexStatsResponse,
    HNSWMethodParameters,
    ImagePreprocessing,
    IndexDefaults,
    IndexSummary,
    ListIndexesResponse,
    ModelProperties,
    RefreshIndexRequest,
    RefreshIndexResponse,
    TextPreprocessing,
)
from marqo_client.models.search import (
    BulkSearchRequest,
    BulkSearchResponse,
    HybridParameters,
    ScoreModifier,
    SearchContext,
    SearchRequest,
    SearchResponse,
    Tensor,
)
from marqo_client.models.system import (
    CUDADevice,
    EjectModelRequest,
    GetCPUInfoResponse,
    GetCUDAInfoResponse,
    GetModelsResponse,
    Model,
)

__all__ = [
    "ANNParameters",
    "BulkSearchRequest",
    "BulkSearchResponse",
    "CreateIndexRequest",
    "CreateIndexResponse",
    "CUDADevice",
    "DeleteDocumentsRequest",
    "DeleteDocumentsResponse",
    "DeleteIndexRequest",
    "Document",
    "EjectModelRequest",
    "GetCPUInfoResponse",
    "GetCUDAInfoResponse",
    "GetDocumentRequest",
    "GetDocumentsRequest",
    "GetDocumentsResponse",
    "GetIndexHealthRequest",
    "GetIndexHealthResponse",
    "GetIndexSettingsRequest",
    "GetIndexSettingsResponse",
    "GetIndexStatsRequest",
    "GetIndexStatsResponse",
    "GetModelsResponse",
    "HNSWMethodParameters",
    "HybridParameters",
    "ImagePreprocessing",
    "IndexDefaults",
    "IndexSummary",
    "ListIndexesResponse",
    "Model",
    "ModelProperties",
    "RefreshIndexRequest",
    "RefreshIndexResponse",
    "ScoreModifier",
    "SearchContext",
    "SearchRequest",
    "SearchResponse",
    "Tensor",
    "TextPreprocessing",
    "UpsertDocumentsRequest",
    "UpsertDocumentsResponse",
    "UpsertItem",
]
