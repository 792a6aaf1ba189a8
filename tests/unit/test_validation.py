"""Unit tests for RequestValidator."""

import pytest

from marqo_client.core.errors import ValidationError
from marqo_client.core.validation import RequestValidator
from marqo_client.models.documents import (
    DeleteDocumentsRequest,
    GetDocumentRequest,
    UpsertDocumentsRequest,
)
from marqo_client.models.indexes import (
    CreateIndexRequest,
    GetIndexStatsRequest,
    IndexDefaults,
    TextPreprocessing,
)
from marqo_client.models.search import (
    BulkSearchRequest,
    HybridParameters,
    SearchRequest,
)
from marqo_client.models.system import EjectModelRequest


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


def test_valid_request_passes(validator: RequestValidator) -> None:
    validator.validate(GetIndexStatsRequest(index_name="test"))


def test_none_request_passes(validator: RequestValidator) -> None:
    validator.validate(None)


@pytest.mark.parametrize(
    "request_model",
    [
        GetIndexStatsRequest(),
        GetIndexStatsRequest(index_name=""),
        CreateIndexRequest(number_of_shards=5),
        SearchRequest(q="hello"),
    ],
)
def test_empty_index_name_is_rejected(
    validator: RequestValidator, request_model: object
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(request_model)

    assert exc_info.value.fields == ["index_name"]


def test_all_violations_are_reported(validator: RequestValidator) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(GetDocumentRequest(), operation="GetDocument")

    assert exc_info.value.fields == ["index_name", "document_id"]
    assert exc_info.value.operation == "GetDocument"


@pytest.mark.parametrize("documents", [None, []])
def test_upsert_requires_documents(
    validator: RequestValidator, documents: list | None
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(UpsertDocumentsRequest(index_name="test", documents=documents))

    assert exc_info.value.fields == ["documents"]


def test_delete_documents_requires_ids(validator: RequestValidator) -> None:
    with pytest.raises(ValidationError, match="ids is required"):
        validator.validate(DeleteDocumentsRequest(index_name="test"))


def test_search_method_must_be_known(validator: RequestValidator) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(SearchRequest(index_name="test", search_method="SEMANTIC"))

    assert exc_info.value.fields == ["search_method"]
    assert "TENSOR, LEXICAL, HYBRID" in str(exc_info.value)


@pytest.mark.parametrize("device", ["cpu", "cuda"])
def test_eject_model_accepts_known_devices(
    validator: RequestValidator, device: str
) -> None:
    validator.validate(EjectModelRequest(model_name="ViT-L/14", model_device=device))


@pytest.mark.parametrize("device", ["gpu", "", None])
def test_eject_model_rejects_unknown_devices(
    validator: RequestValidator, device: str | None
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(EjectModelRequest(model_name="ViT-L/14", model_device=device))

    assert exc_info.value.fields == ["model_device"]


def test_nested_choices_are_checked(validator: RequestValidator) -> None:
    request = CreateIndexRequest(
        index_name="test",
        index_defaults=IndexDefaults(
            text_preprocessing=TextPreprocessing(split_method="paragraph")
        ),
    )

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(request)

    assert exc_info.value.fields == ["index_defaults.text_preprocessing.split_method"]


def test_hybrid_parameters_choices_are_checked(validator: RequestValidator) -> None:
    request = SearchRequest(
        index_name="test",
        search_method="HYBRID",
        hybrid_parameters=HybridParameters(ranking_method="borda"),
    )

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(request)

    assert exc_info.value.fields == ["hybrid_parameters.ranking_method"]


def test_bulk_search_reports_query_position(validator: RequestValidator) -> None:
    request = BulkSearchRequest(
        queries=[SearchRequest(index_name="a"), SearchRequest(q="missing index")]
    )

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(request)

    assert exc_info.value.fields == ["queries.1.index_name"]


def test_bulk_search_requires_queries(validator: RequestValidator) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(BulkSearchRequest(queries=[]))

    assert exc_info.value.fields == ["queries"]


def test_validation_error_is_a_value_error(validator: RequestValidator) -> None:
    with pytest.raises(ValueError):
        validator.validate(GetIndexStatsRequest())
