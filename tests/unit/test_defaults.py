"""Unit tests for request defaulting.

These tests verify that defaults:
- Fill only fields the caller left unset
- Never overwrite caller-supplied values, including zero and False
- Are idempotent
- Only descend into nested configuration the caller supplied
"""

from marqo_client.core.defaults import (
    default_bulk_search,
    default_create_index,
    default_search,
)
from marqo_client.models.indexes import (
    ANNParameters,
    CreateIndexRequest,
    HNSWMethodParameters,
    ImagePreprocessing,
    IndexDefaults,
    TextPreprocessing,
)
from marqo_client.models.search import (
    BulkSearchRequest,
    HybridParameters,
    SearchRequest,
)


class TestCreateIndexDefaults:
    """Test defaults applied to index creation."""

    def test_empty_request_gets_top_level_defaults(self) -> None:
        """index_defaults is synthesized and filled when omitted."""
        result = default_create_index(CreateIndexRequest(index_name="test"))

        assert result.number_of_shards == 3
        assert result.number_of_replicas == 0
        assert result.index_defaults is not None
        assert result.index_defaults.treat_urls_and_pointers_as_images is False
        assert result.index_defaults.normalize_embeddings is True

    def test_absent_nested_structures_stay_absent(self) -> None:
        result = default_create_index(CreateIndexRequest(index_name="test"))

        assert result.index_defaults.text_preprocessing is None
        assert result.index_defaults.image_preprocessing is None
        assert result.index_defaults.ann_parameters is None

    def test_supplied_shard_count_is_kept(self) -> None:
        """Supplying shard count 5 keeps it and defaults replicas to 0."""
        result = default_create_index(
            CreateIndexRequest(index_name="test", number_of_shards=5)
        )

        assert result.number_of_shards == 5
        assert result.number_of_replicas == 0

    def test_zero_and_false_are_not_overwritten(self) -> None:
        request = CreateIndexRequest(
            index_name="test",
            number_of_shards=0,
            index_defaults=IndexDefaults(
                normalize_embeddings=False,
                text_preprocessing=TextPreprocessing(split_length=0),
            ),
        )

        result = default_create_index(request)

        assert result.number_of_shards == 0
        assert result.index_defaults.normalize_embeddings is False
        assert result.index_defaults.text_preprocessing.split_length == 0

    def test_supplied_nested_structures_are_filled(self) -> None:
        request = CreateIndexRequest(
            index_name="test",
            index_defaults=IndexDefaults(
                model="hf/all_datasets_v4_MiniLM-L6",
                text_preprocessing=TextPreprocessing(split_method="word"),
                image_preprocessing=ImagePreprocessing(),
                ann_parameters=ANNParameters(parameters=HNSWMethodParameters(m=32)),
            ),
        )

        settings = default_create_index(request).index_defaults

        assert settings.model == "hf/all_datasets_v4_MiniLM-L6"
        assert settings.text_preprocessing == TextPreprocessing(
            split_length=2, split_overlap=0, split_method="word"
        )
        assert settings.image_preprocessing.patch_method == "simple"
        assert settings.ann_parameters.space_type == "cosine"
        assert settings.ann_parameters.parameters.ef_construction == 128
        assert settings.ann_parameters.parameters.m == 32

    def test_ann_without_parameters_keeps_parameters_absent(self) -> None:
        request = CreateIndexRequest(
            index_name="test",
            index_defaults=IndexDefaults(ann_parameters=ANNParameters()),
        )

        ann = default_create_index(request).index_defaults.ann_parameters

        assert ann.space_type == "cosine"
        assert ann.parameters is None

    def test_defaulting_is_idempotent(self) -> None:
        request = CreateIndexRequest(
            index_name="test",
            number_of_replicas=1,
            index_defaults=IndexDefaults(
                text_preprocessing=TextPreprocessing(),
                ann_parameters=ANNParameters(parameters=HNSWMethodParameters()),
            ),
        )

        once = default_create_index(request)
        twice = default_create_index(once)

        assert twice == once

    def test_input_request_is_not_modified(self) -> None:
        request = CreateIndexRequest(index_name="test")

        default_create_index(request)

        assert request.number_of_shards is None
        assert request.index_defaults is None


class TestSearchDefaults:
    """Test defaults applied to search requests."""

    def test_unset_paging_defaults(self) -> None:
        result = default_search(SearchRequest(index_name="test", q="hello"))

        assert result.limit == 20
        assert result.offset == 0
        assert result.show_highlights is True
        assert result.search_method == "TENSOR"

    def test_supplied_values_are_kept(self) -> None:
        result = default_search(
            SearchRequest(
                index_name="test",
                limit=5,
                offset=10,
                show_highlights=False,
                search_method="LEXICAL",
            )
        )

        assert (result.limit, result.offset) == (5, 10)
        assert result.show_highlights is False
        assert result.search_method == "LEXICAL"

    def test_hybrid_parameters_defaulted_for_hybrid_search(self) -> None:
        request = SearchRequest(
            index_name="test",
            search_method="HYBRID",
            hybrid_parameters=HybridParameters(alpha=0.5),
        )

        hybrid = default_search(request).hybrid_parameters

        assert hybrid.ranking_method == "rrf"
        assert hybrid.retrieval_method == "disjunction"
        assert hybrid.alpha == 0.5

    def test_hybrid_parameters_keep_supplied_methods(self) -> None:
        request = SearchRequest(
            index_name="test",
            search_method="HYBRID",
            hybrid_parameters=HybridParameters(
                ranking_method="normalize_linear", retrieval_method="tensor"
            ),
        )

        hybrid = default_search(request).hybrid_parameters

        assert hybrid.ranking_method == "normalize_linear"
        assert hybrid.retrieval_method == "tensor"

    def test_hybrid_parameters_untouched_for_other_methods(self) -> None:
        request = SearchRequest(
            index_name="test",
            search_method="TENSOR",
            hybrid_parameters=HybridParameters(),
        )

        hybrid = default_search(request).hybrid_parameters

        assert hybrid.ranking_method is None
        assert hybrid.retrieval_method is None

    def test_missing_hybrid_parameters_are_not_synthesized(self) -> None:
        result = default_search(SearchRequest(index_name="test", search_method="HYBRID"))

        assert result.hybrid_parameters is None

    def test_search_defaulting_is_idempotent(self) -> None:
        request = SearchRequest(
            index_name="test",
            search_method="HYBRID",
            hybrid_parameters=HybridParameters(),
        )

        once = default_search(request)

        assert default_search(once) == once


def test_bulk_search_defaults_each_query_independently() -> None:
    request = BulkSearchRequest(
        queries=[
            SearchRequest(index_name="a", q="one"),
            SearchRequest(index_name="b", q="two", limit=3),
        ]
    )

    queries = default_bulk_search(request).queries

    assert [query.limit for query in queries] == [20, 3]
    assert all(query.offset == 0 for query in queries)
    assert all(query.search_method == "TENSOR" for query in queries)
