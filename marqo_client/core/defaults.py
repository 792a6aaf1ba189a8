"""Client-side defaults for requests with optional configuration.

Each function returns a new request with the documented default substituted
for every field that is still None. Caller-supplied values, including zero,
False and empty strings, are never replaced, so applying a function twice
gives the same result as applying it once.

Nested configuration objects are only defaulted when the caller supplied
them. The one exception is CreateIndexRequest.index_defaults, which is
created empty when absent and then defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from marqo_client.models.indexes import (
    ANNParameters,
    CreateIndexRequest,
    IndexDefaults,
)
from marqo_client.models.search import BulkSearchRequest, SearchRequest

ModelT = TypeVar("ModelT", bound=BaseModel)

# Index creation
DEFAULT_NUMBER_OF_SHARDS = 3
DEFAULT_NUMBER_OF_REPLICAS = 0
INDEX_DEFAULTS: dict[str, Any] = {
    "treat_urls_and_pointers_as_images": False,
    "normalize_embeddings": True,
}
TEXT_PREPROCESSING_DEFAULTS: dict[str, Any] = {
    "split_length": 2,
    "split_overlap": 0,
    "split_method": "sentence",
}
IMAGE_PREPROCESSING_DEFAULTS: dict[str, Any] = {"patch_method": "simple"}
ANN_DEFAULTS: dict[str, Any] = {"space_type": "cosine"}
HNSW_DEFAULTS: dict[str, Any] = {"ef_construction": 128, "m": 16}

# Search
SEARCH_DEFAULTS: dict[str, Any] = {
    "limit": 20,
    "offset": 0,
    "show_highlights": True,
    "search_method": "TENSOR",
}
HYBRID_DEFAULTS: dict[str, Any] = {
    "ranking_method": "rrf",
    "retrieval_method": "disjunction",
}


def fill_unset(model: ModelT, defaults: Mapping[str, Any]) -> ModelT:
    """Return a copy of model with each None field in defaults filled in.

    Args:
        model: Model to default
        defaults: Field name -> default value

    Returns:
        The same instance when nothing was unset, otherwise an updated copy
    """
    updates = {
        name: value for name, value in defaults.items() if getattr(model, name) is None
    }
    if not updates:
        return model
    return model.model_copy(update=updates)


def default_create_index(request: CreateIndexRequest) -> CreateIndexRequest:
    """Apply index-creation defaults."""
    settings = fill_unset(request.index_defaults or IndexDefaults(), INDEX_DEFAULTS)

    nested: dict[str, Any] = {}
    if settings.text_preprocessing is not None:
        nested["text_preprocessing"] = fill_unset(
            settings.text_preprocessing, TEXT_PREPROCESSING_DEFAULTS
        )
    if settings.image_preprocessing is not None:
        nested["image_preprocessing"] = fill_unset(
            settings.image_preprocessing, IMAGE_PREPROCESSING_DEFAULTS
        )
    if settings.ann_parameters is not None:
        nested["ann_parameters"] = _default_ann(settings.ann_parameters)
    if nested:
        settings = settings.model_copy(update=nested)

    request = fill_unset(
        request,
        {
            "number_of_shards": DEFAULT_NUMBER_OF_SHARDS,
            "number_of_replicas": DEFAULT_NUMBER_OF_REPLICAS,
        },
    )
    return request.model_copy(update={"index_defaults": settings})


def _default_ann(ann: ANNParameters) -> ANNParameters:
    ann = fill_unset(ann, ANN_DEFAULTS)
    if ann.parameters is None:
        return ann
    return ann.model_copy(update={"parameters": fill_unset(ann.parameters, HNSW_DEFAULTS)})


def default_search(request: SearchRequest) -> SearchRequest:
    """Apply search defaults, including hybrid defaults for HYBRID search."""
    request = fill_unset(request, SEARCH_DEFAULTS)
    if request.search_method == "HYBRID" and request.hybrid_parameters is not None:
        hybrid = fill_unset(request.hybrid_parameters, HYBRID_DEFAULTS)
        if hybrid is not request.hybrid_parameters:
            request = request.model_copy(update={"hybrid_parameters": hybrid})
    return request


def default_bulk_search(request: BulkSearchRequest) -> BulkSearchRequest:
    """Default every query of a bulk search as a standalone search."""
    if not request.queries:
        return request
    return request.model_copy(
        update={"queries": [default_search(query) for query in request.queries]}
    )
