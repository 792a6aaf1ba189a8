"""Request and response models for index management operations."""

from __future__ import annotations

from pydantic import Field

from marqo_client.core.fields import (
    BodyParam,
    Choice,
    PathParam,
    RequestModel,
    ResponseModel,
    WireModel,
)

SPLIT_METHODS = ("sentence", "word", "character", "passage")


class ModelProperties(WireModel):
    """Properties of a custom (non-registry) embedding model."""

    name: str | None = None
    dimensions: int | None = None
    url: str | None = None
    type: str | None = None


class TextPreprocessing(WireModel):
    """How text fields are chunked before vectorisation.

    Attributes:
        split_length: Number of split units per chunk (default: 2)
        split_overlap: Units shared between adjacent chunks (default: 0)
        split_method: One of sentence, word, character, passage
            (default: sentence)
        override_text_chunk_prefix: Prefix added to each chunk before
            vectorisation
        override_text_query_prefix: Prefix added to queries before
            vectorisation
    """

    split_length: int | None = None
    split_overlap: int | None = None
    split_method: str | None = Choice(*SPLIT_METHODS)
    override_text_chunk_prefix: str | None = None
    override_text_query_prefix: str | None = None


class ImagePreprocessing(WireModel):
    """How images are chunked (default patch method: simple)."""

    patch_method: str | None = None


class HNSWMethodParameters(WireModel):
    """HNSW graph construction parameters."""

    ef_construction: int | None = None
    m: int | None = None


class ANNParameters(WireModel):
    """Approximate nearest-neighbour index configuration."""

    space_type: str | None = None
    parameters: HNSWMethodParameters | None = None


class IndexDefaults(WireModel):
    """Index-wide settings applied to every document."""

    treat_urls_and_pointers_as_images: bool | None = None
    model: str | None = None
    model_properties: ModelProperties | None = None
    normalize_embeddings: bool | None = None
    text_preprocessing: TextPreprocessing | None = None
    image_preprocessing: ImagePreprocessing | None = None
    ann_parameters: ANNParameters | None = None


class CreateIndexRequest(RequestModel):
    """Request to create an index.

    Attributes:
        index_name: Name of the index to create
        index_defaults: Index-wide settings; synthesized when omitted
        number_of_shards: Number of shards (default: 3)
        number_of_replicas: Number of replicas (default: 0)

    Example:
        >>> request = CreateIndexRequest(
        ...     index_name="docs",
        ...     index_defaults=IndexDefaults(model="hf/all_datasets_v4_MiniLM-L6"),
        ... )
    """

    index_name: str = PathParam()
    index_defaults: IndexDefaults | None = BodyParam()
    number_of_shards: int | None = BodyParam()
    number_of_replicas: int | None = BodyParam()


class CreateIndexResponse(ResponseModel):
    acknowledged: bool
    shards_acknowledged: bool
    index: str


class DeleteIndexRequest(RequestModel):
    index_name: str = PathParam()


class IndexSummary(ResponseModel):
    index_name: str


class ListIndexesResponse(ResponseModel):
    results: list[IndexSummary]


class GetIndexHealthRequest(RequestModel):
    index_name: str = PathParam()


class ComponentHealth(ResponseModel):
    status: str
    storage_is_available: bool | None = None


class GetIndexHealthResponse(ResponseModel):
    """Health of an index and the components serving it."""

    status: str
    backend: ComponentHealth | None = None
    inference: ComponentHealth | None = None


class GetIndexSettingsRequest(RequestModel):
    index_name: str = PathParam()


class GetIndexSettingsResponse(ResponseModel):
    index_defaults: IndexDefaults | None = None
    number_of_shards: int | None = None
    number_of_replicas: int | None = None


class GetIndexStatsRequest(RequestModel):
    index_name: str = PathParam()


class GetIndexStatsResponse(ResponseModel):
    """Document and vector counts of an index."""

    number_of_documents: int = Field(alias="numberOfDocuments")
    number_of_vectors: int = Field(alias="numberOfVectors")


class RefreshIndexRequest(RequestModel):
    index_name: str = PathParam()


class ShardsInfo(ResponseModel):
    total: int
    successful: int
    failed: int


class RefreshIndexResponse(ResponseModel):
    shards: ShardsInfo = Field(alias="_shards")
