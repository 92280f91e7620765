"""Tests for MultiFieldSearchEngine: options, ranking, highlighting and AND queries."""

from types import SimpleNamespace

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from modelsearch_core import (
    ConfigurationError,
    ContentKind,
    FuzzyScorer,
    MultiFieldSearchEngine,
    default_engine,
    SearchOptions,
    search_mental_models,
    search_narratives,
)

TITLE_ONLY = SearchOptions(fields=("title",))


class TestSearchOptions:
    """Tests for option validation."""

    def test_defaults(self):
        options = SearchOptions()
        assert options.fuzzy_threshold == 0.3
        assert options.max_results == 50
        assert options.fields == ("title", "summary", "category", "tags")
        assert options.case_sensitive is False
        assert options.include_highlights is True

    @pytest.mark.parametrize("threshold", [-0.1, 1.5, float("nan"), "0.5", None, True])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(ConfigurationError):
            SearchOptions(fuzzy_threshold=threshold)

    @pytest.mark.parametrize("max_results", [0, -3, 2.5, None, True])
    def test_invalid_max_results(self, max_results):
        with pytest.raises(ConfigurationError):
            SearchOptions(max_results=max_results)

    def test_empty_fields(self):
        with pytest.raises(ConfigurationError):
            SearchOptions(fields=())

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SearchOptions(max_results=0)

    def test_boundaries_accepted(self):
        SearchOptions(fuzzy_threshold=0.0)
        SearchOptions(fuzzy_threshold=1.0, max_results=1)

    def test_single_field_string(self):
        assert SearchOptions(fields="title").fields == ("title",)

    def test_replace_validates(self):
        options = SearchOptions()
        assert options.replace(max_results=5).max_results == 5
        with pytest.raises(ConfigurationError):
            options.replace(fuzzy_threshold=2)

    def test_for_kind(self):
        assert SearchOptions.for_kind(ContentKind.MENTAL_MODEL).fields == (
            "name", "description", "category", "tags",
        )
        assert SearchOptions.for_kind("narrative", max_results=3).max_results == 3

    def test_engine_revalidates_mutated_options(self, engine):
        options = SearchOptions()
        options.max_results = 0
        with pytest.raises(ConfigurationError):
            engine.search([{"title": "First"}], "first", options)

    def test_invalid_options_fail_even_for_blank_query(self, engine):
        options = SearchOptions()
        options.fuzzy_threshold = 3
        with pytest.raises(ConfigurationError):
            engine.search([], "", options)


class TestSearch:
    """Tests for single-query search."""

    def test_substring_match(self, engine):
        records = [{"title": "First Principles"}, {"title": "Second Law"}]
        results = engine.search(records, "first", TITLE_ONLY)

        assert len(results) == 1
        assert results[0].item is records[0]
        assert results[0].score == 0.9
        assert results[0].matches[0].field == "title"
        assert results[0].matches[0].spans == [(0, 5)]
        assert results[0].highlights == {"title": "<mark>First</mark> Principles"}

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_returns_nothing(self, engine, narratives, query):
        assert engine.search(narratives, query) == []

    def test_empty_pool(self, engine):
        assert engine.search([], "first") == []

    def test_score_is_mean_of_matched_fields(self, engine):
        record = {
            "title": "Making",
            "summary": "Making decisions under uncertainty",
            "category": "Decision",
        }
        options = SearchOptions(fields=("title", "summary", "category"))
        [result] = engine.search([record], "making", options)

        assert result.matched_fields == ["title", "summary"]
        assert result.score == pytest.approx((1.0 + 0.9) / 2)

    def test_record_without_matches_excluded(self, engine):
        results = engine.search([{"title": "Inversion"}], "zebra", TITLE_ONLY)
        assert results == []

    def test_fuzzy_match_has_no_spans(self, engine):
        [result] = engine.search([{"title": "Principles"}], "principels", TITLE_ONLY)
        assert result.score == pytest.approx(0.56)
        assert result.matches[0].spans == []
        assert result.highlights == {"title": "Principles"}

    def test_threshold_filters_fuzzy_matches(self, engine):
        options = SearchOptions(fields=("title",), fuzzy_threshold=0.6)
        assert engine.search([{"title": "Principles"}], "principels", options) == []

    def test_list_fields_joined(self, engine):
        record = {"title": "Growth", "tags": ["systems thinking", "feedback"]}
        [result] = engine.search([record], "feedback", SearchOptions(fields=("tags",)))

        assert result.matches[0].spans == [(17, 25)]
        assert result.highlights == {"tags": "systems thinking, <mark>feedback</mark>"}

    def test_malformed_records_tolerated(self, engine):
        records = [
            {},
            {"title": None, "tags": "feedback"},
            SimpleNamespace(title="Feedback Loops"),
            {"title": {"nested": "feedback"}},
        ]
        options = SearchOptions(fields=("title", "tags"))
        results = engine.search(records, "feedback", options)

        assert [r.item for r in results] == [records[1], records[2]]
        assert results[0].score == 1.0

    def test_case_sensitive(self, engine):
        options = SearchOptions(fields=("title",), case_sensitive=True)
        [result] = engine.search([{"title": "First"}], "first", options)
        assert result.score == pytest.approx(0.56)
        assert result.highlights == {"title": "First"}

    def test_highlights_disabled(self, engine):
        options = SearchOptions(fields=("title",), include_highlights=False)
        [result] = engine.search([{"title": "First Principles"}], "first", options)
        assert result.highlights is None
        assert result.matches[0].spans == []

    def test_ranked_by_score(self, engine):
        records = [{"title": "Beta"}, {"title": "Alpha x"}, {"title": "Alpha"}]
        results = engine.search(records, "alpha", TITLE_ONLY)
        assert [r.item["title"] for r in results] == ["Alpha", "Alpha x"]

    def test_ties_keep_input_order(self, engine):
        records = [{"title": f"Alpha {name}"} for name in ("one", "two", "three", "four")]
        results = engine.search(records, "alpha", TITLE_ONLY)
        assert [r.item for r in results] == records

    def test_max_results(self, engine):
        records = [{"title": f"Model {i}"} for i in range(10)]
        results = engine.search(records, "model", TITLE_ONLY.replace(max_results=3))
        assert [r.item for r in results] == records[:3]

    def test_uses_engine_default_options(self):
        engine = MultiFieldSearchEngine(options=SearchOptions(fields=("name",)))
        [result] = engine.search([{"name": "Inversion", "title": "x"}], "inversion")
        assert result.matched_fields == ["name"]

    def test_shared_scorer_cache(self):
        scorer = FuzzyScorer()
        first = MultiFieldSearchEngine(scorer=scorer)
        second = MultiFieldSearchEngine(scorer=scorer)
        records = [{"title": "First Principles"}]
        first.search(records, "first", TITLE_ONLY)
        second.search(records, "first", TITLE_ONLY)
        assert scorer.cache.get_statistics()["hits"] == 1


class TestKindSearch:
    """Tests for the narrative and mental model helpers."""

    def test_search_narratives(self, narratives):
        results = search_narratives(narratives, "anchoring")
        assert results[0].item["narrative_id"] == "NAR-002"
        assert results[0].matched_fields == ["title"]

    def test_search_narratives_tags(self, narratives):
        results = search_narratives(narratives, "bias")
        assert [r.item["narrative_id"] for r in results] == ["NAR-001", "NAR-002"]
        assert all("tags" in r.matched_fields for r in results)

    def test_search_mental_models(self, mental_models):
        results = search_mental_models(mental_models, "first principles")
        assert results[0].item["code"] == "P1"
        assert results[0].matched_fields == ["name"]

    def test_mental_model_description_alias(self, mental_models):
        results = search_mental_models(mental_models, "opposite outcome")
        assert [r.item["code"] for r in results] == ["IN1"]
        assert results[0].matched_fields == ["description"]

    def test_helpers_reuse_one_engine_per_kind(self):
        narrative_engine = default_engine(ContentKind.NARRATIVE)
        assert default_engine(ContentKind.NARRATIVE) is narrative_engine
        assert default_engine("narrative") is narrative_engine
        assert default_engine(ContentKind.MENTAL_MODEL).scorer is narrative_engine.scorer

    def test_helpers_share_score_cache_across_calls(self):
        cache = default_engine(ContentKind.NARRATIVE).scorer.cache
        records = [{"narrative_id": "NAR-900", "title": "Kelly criterion sizing"}]
        before = cache.get_statistics()

        search_narratives(records, "kelly criterion")
        search_narratives(records, "kelly criterion")

        after = cache.get_statistics()
        assert after["misses"] - before["misses"] == 1
        assert after["hits"] - before["hits"] == 1

    def test_explicit_scorer_bypasses_shared_engine(self, scorer):
        records = [{"narrative_id": "NAR-901", "title": "Margin of safety"}]
        search_narratives(records, "margin", scorer=scorer)
        search_narratives(records, "margin", scorer=scorer)
        assert scorer.cache.get_statistics()["hits"] == 1


class TestMultiQuerySearch:
    """Tests for AND-combined queries."""

    def test_intersection_in_first_query_order(self, engine):
        records = [
            {"title": "apple"},
            {"title": "apple banana"},
            {"title": "banana apple pie"},
            {"title": "banana"},
        ]
        results = engine.multi_query_search(records, ["apple", "banana"], TITLE_ONLY)

        assert [r.item for r in results] == [records[1], records[2]]
        assert [r.score for r in results] == [0.9, 0.9]

    def test_no_queries(self, engine):
        assert engine.multi_query_search([{"title": "apple"}], []) == []

    def test_single_query_equals_search(self, engine, narratives):
        assert engine.multi_query_search(narratives, ["bias"]) == engine.search(narratives, "bias")

    def test_identity_not_equality(self, engine):
        records = [{"title": "apple pie"}, {"title": "apple pie"}]
        results = engine.multi_query_search(records, ["apple", "pie"], TITLE_ONLY)
        assert [r.item for r in results] == records
        assert results[1].item is records[1]


class TestSuggest:
    """Tests for recent-search suggestions."""

    RECENT = ["machine learning", "first principles", "inversion"]

    def test_matching_suggestions(self, engine):
        assert engine.suggest("First", self.RECENT) == ["first principles"]

    def test_blank_query_returns_recent(self, engine):
        assert engine.suggest("", self.RECENT, max_suggestions=2) == self.RECENT[:2]

    def test_ranked(self, engine):
        recent = ["first principles", "first"]
        assert engine.suggest("first", recent) == ["first", "first principles"]

    def test_zero_suggestions(self, engine):
        assert engine.suggest("first", self.RECENT, max_suggestions=0) == []


record_strategy = st.fixed_dictionaries({"title": st.text(alphabet="abc ", max_size=12)})


class TestSearchProperties:
    """Property-based checks for filtering, capping and ordering."""

    @given(
        records=st.lists(record_strategy, max_size=25),
        query=st.text(alphabet="abc ", min_size=1, max_size=4),
        threshold=st.floats(min_value=0.0, max_value=1.0),
        max_results=st.integers(min_value=1, max_value=10),
    )
    @settings(max_examples=150, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_filter_cap_and_order(self, engine, records, query, threshold, max_results):
        options = SearchOptions(
            fields=("title",), fuzzy_threshold=threshold, max_results=max_results,
        )
        results = engine.search(records, query, options)

        assert len(results) <= max_results
        assert all(r.score >= threshold - 1e-12 for r in results)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

        # Equal scores keep input order
        positions = [next(i for i, rec in enumerate(records) if rec is r.item) for r in results]
        for (a, pa), (b, pb) in zip(zip(scores, positions), zip(scores[1:], positions[1:])):
            if a == b:
                assert pa < pb
