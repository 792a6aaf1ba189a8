"""Request and response models for search and bulk search."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from marqo_client.core.fields import (
    BodyParam,
    Choice,
    PathParam,
    QueryParam,
    RequestModel,
    ResponseModel,
    WireModel,
)

SEARCH_METHODS = ("TENSOR", "LEXICAL", "HYBRID")
RETRIEVAL_METHODS = ("disjunction", "tensor", "lexical")
RANKING_METHODS = ("rrf", "normalize_linear", "tensor", "lexical")


class Tensor(WireModel):
    """A caller-supplied vector and the weight it contributes to the query."""

    vector: list[float]
    weight: float


class SearchContext(WireModel):
    tensor: list[Tensor]


class ScoreModifier(WireModel):
    """Weighting applied to a numeric document field.

    Weight defaults server-side to 1 for multiply_score_by and 0 for
    add_to_score.
    """

    field_name: str
    weight: float


# Keys: "multiply_score_by", "add_to_score"
ScoreModifiers = dict[str, list[ScoreModifier]]


class HybridParameters(WireModel):
    """Parameters for HYBRID search.

    See https://docs.marqo.ai/2.10/API-Reference/Search/search/#hybrid-parameters

    Example:
        >>> HybridParameters(retrieval_method="disjunction", ranking_method="rrf")
    """

    retrieval_method: str | None = Choice(*RETRIEVAL_METHODS, alias="retrievalMethod")
    ranking_method: str | None = Choice(*RANKING_METHODS, alias="rankingMethod")
    score_modifiers_tensor: ScoreModifiers | None = Field(
        default=None, alias="scoreModifiersTensor"
    )
    score_modifiers_lexical: ScoreModifiers | None = Field(
        default=None, alias="scoreModifiersLexical"
    )
    searchable_attributes_lexical: list[str] | None = Field(
        default=None, alias="searchableAttributesLexical"
    )
    searchable_attributes_tensor: list[str] | None = Field(
        default=None, alias="searchableAttributesTensor"
    )
    alpha: float | None = None
    rrf_k: int | None = Field(default=None, alias="rrfK")


class SearchRequest(RequestModel):
    """Request to search an index.

    Paging, filtering and method selection travel as query parameters; the
    query text and the structured scoring inputs travel in the JSON body.
    Inside a bulk search the whole request is sent as one body object, with
    index_name renamed to "index".

    Attributes:
        index_name: Index to search
        q: Query string, or a mapping of weighted sub-queries
        limit: Number of results to return (default: 20)
        offset: Number of results to skip (default: 0)
        filter: Filter expression
        searchable_attributes: Attributes to search in (server default: all)
        show_highlights: Return highlights for TENSOR matches (default: True)
        search_method: TENSOR, LEXICAL or HYBRID (default: TENSOR)
        attributes_to_retrieve: Attributes to return (server default: all)
        re_ranker: Re-ranking model, e.g. "owl/ViT-B/32"
        text_query_prefix: Prefix added to text queries before vectorisation
        hybrid_parameters: Tuning for HYBRID search, sent as a JSON string
        device: Device to run inference on
        telemetry: Include latency telemetry in the response
        boost: attribute -> [weight, bias]
        image_download_headers: Headers used to download query images
        context: Caller-supplied vectors blended into the query
        score_modifiers: Numeric fields used to adjust scores
        model_auth: Credentials for downloading private models
    """

    index_name: str = PathParam()

    # Query params
    limit: int | None = QueryParam()
    offset: int | None = QueryParam()
    filter: str | None = QueryParam()
    searchable_attributes: list[str] | None = QueryParam(alias="searchableAttributes")
    show_highlights: bool | None = QueryParam(alias="showHighlights")
    search_method: str | None = QueryParam(alias="searchMethod", choices=SEARCH_METHODS)
    attributes_to_retrieve: list[str] | None = QueryParam(alias="attributesToRetrieve")
    re_ranker: str | None = QueryParam(alias="reRanker")
    text_query_prefix: str | None = QueryParam(alias="textQueryPrefix")
    hybrid_parameters: HybridParameters | None = QueryParam(alias="hybridParameters")
    device: str | None = QueryParam()
    telemetry: bool | None = QueryParam()

    # Body params
    q: str | dict[str, float] | None = BodyParam()
    boost: dict[str, tuple[float, float]] | None = BodyParam()
    image_download_headers: dict[str, Any] | None = BodyParam()
    context: SearchContext | None = BodyParam()
    score_modifiers: ScoreModifiers | None = BodyParam(alias="scoreModifiers")
    model_auth: dict[str, Any] | None = BodyParam(alias="modelAuth")

    def as_bulk_query(self) -> dict[str, Any]:
        """Return this search as one query object of a bulk search body."""
        data = self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"index_name"}
        )
        return {"index": self.index_name, **data}


class SearchResponse(ResponseModel):
    hits: list[dict[str, Any]]
    limit: int
    offset: int
    processing_time_ms: float = Field(alias="processingTimeMs")
    query: str | dict[str, Any] | None = None


class BulkSearchRequest(RequestModel):
    """Several independent searches sent in one call.

    Each query names its own index and is defaulted and validated exactly
    like a standalone SearchRequest.
    """

    queries: list[SearchRequest] | None = BodyParam(required=True)

    # Query params
    device: str | None = QueryParam()
    telemetry: bool | None = QueryParam()

    def wire_value(self, name: str) -> Any:
        if name == "queries" and self.queries is not None:
            return [query.as_bulk_query() for query in self.queries]
        return super().wire_value(name)


class BulkSearchResponse(ResponseModel):
    results: list[SearchResponse]
    processing_time_ms: float = Field(alias="processingTimeMs")
