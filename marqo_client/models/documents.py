"""Request and response models for document operations."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from marqo_client.core.fields import (
    BodyParam,
    PathParam,
    QueryParam,
    RequestModel,
    ResponseModel,
)

Document = dict[str, Any]


class UpsertDocumentsRequest(RequestModel):
    """Request to add or replace documents in an index.

    Documents carrying an "_id" replace the stored document with that id;
    documents without one get a server-generated id.

    Example:
        >>> request = UpsertDocumentsRequest(
        ...     index_name="docs",
        ...     documents=[{"_id": "1", "title": "Document 1"}],
        ...     tensor_fields=["title"],
        ... )
    """

    index_name: str = PathParam()

    # Query params
    refresh: bool | None = QueryParam()
    device: str | None = QueryParam()
    telemetry: bool | None = QueryParam()

    # Body params
    documents: list[Document] | None = BodyParam(required=True)
    tensor_fields: list[str] | None = BodyParam(alias="tensorFields")
    use_existing_tensors: bool | None = BodyParam(alias="useExistingTensors")
    image_download_headers: dict[str, str] | None = BodyParam(
        alias="imageDownloadHeaders"
    )
    mappings: dict[str, Any] | None = BodyParam()
    model_auth: dict[str, Any] | None = BodyParam(alias="modelAuth")
    text_chunk_prefix: str | None = BodyParam(alias="textChunkPrefix")
    client_batch_size: int | None = BodyParam()


class UpsertItem(ResponseModel):
    """Per-document outcome of an upsert."""

    id: str | None = Field(default=None, alias="_id")
    result: str | None = None
    status: int
    error: str | None = None


class UpsertDocumentsResponse(ResponseModel):
    """Upsert outcome.

    errors is True when at least one item failed; inspect each item's status
    to find out which.
    """

    errors: bool
    items: list[UpsertItem]
    processing_time_ms: float = Field(alias="processingTimeMs")
    index_name: str


class DeleteDocumentsRequest(RequestModel):
    """Request to delete documents by id. The ids are sent as a bare array."""

    index_name: str = PathParam()
    ids: list[str] | None = BodyParam(required=True, root=True)


class DeletionDetails(ResponseModel):
    received_document_ids: int = Field(alias="receivedDocumentIds")
    deleted_documents: int = Field(alias="deletedDocuments")


class DeleteItem(ResponseModel):
    id: str | None = Field(default=None, alias="_id")
    result: str | None = None
    status: int | None = None


class DeleteDocumentsResponse(ResponseModel):
    index_name: str
    status: str
    type: str | None = None
    details: DeletionDetails | None = None
    items: list[DeleteItem] | None = None
    duration: str | None = None
    started_at: str | None = Field(default=None, alias="startedAt")
    finished_at: str | None = Field(default=None, alias="finishedAt")


class GetDocumentRequest(RequestModel):
    """Request to fetch one document by id.

    expose_facets also returns the document's tensor facets and embeddings.
    """

    index_name: str = PathParam()
    document_id: str = PathParam()
    expose_facets: bool | None = QueryParam()


class GetDocumentsRequest(RequestModel):
    """Request to fetch several documents by id in one call."""

    index_name: str = PathParam()
    ids: list[str] | None = BodyParam(required=True, root=True)
    expose_facets: bool | None = QueryParam()


class GetDocumentsResponse(ResponseModel):
    """Fetched documents; missing ids come back with "_found": false."""

    results: list[Document]
