"""ModelSearch Core Engine - Multi-Field Fuzzy Search.

The MultiFieldSearchEngine scores every configured field of every record
with the FuzzyScorer, keeps the fields that clear the threshold, averages
them into one record score and returns the records ranked by that score.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from modelsearch_core.analyzers.highlighter import (
    Span,
    find_spans,
    merge_spans,
    render_highlight,
    to_markup,
)
from modelsearch_core.errors import ConfigurationError
from modelsearch_core.ranking.fuzzy import FuzzyScorer
from modelsearch_core.ranking.scorer import ScoringContext
from modelsearch_core.records.adapters import MappingAdapter, RecordAdapter, adapter_for
from modelsearch_core.records.document import ContentKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FIELDS: Tuple[str, ...] = ("title", "summary", "category", "tags")

KIND_DEFAULT_FIELDS: Dict[ContentKind, Tuple[str, ...]] = {
    ContentKind.NARRATIVE: ("title", "summary", "category", "tags"),
    ContentKind.MENTAL_MODEL: ("name", "description", "category", "tags"),
}

# Minimum fuzzy score for a recent search to be suggested
SUGGESTION_THRESHOLD = 0.3

# Separator used when list fields are shown to users
DISPLAY_SEPARATOR = ", "


@dataclass
class SearchOptions:
    """Search configuration.

    Attributes:
        fuzzy_threshold: Minimum per-field score that counts as a match
        max_results: Maximum number of results returned
        fields: Logical fields to search; order does not affect scoring
        case_sensitive: Compare case exactly
        include_highlights: Attach match spans and highlighted strings
    """

    fuzzy_threshold: float = 0.3
    max_results: int = 50
    fields: Tuple[str, ...] = DEFAULT_FIELDS
    case_sensitive: bool = False
    include_highlights: bool = True

    def __post_init__(self):
        """Normalize fields and validate."""
        if isinstance(self.fields, str):
            self.fields = (self.fields,)
        elif self.fields is not None:
            self.fields = tuple(self.fields)
        self.validate()

    def validate(self) -> None:
        """Check option values.

        Raises:
            ConfigurationError: If any option is out of range
        """
        threshold = self.fuzzy_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, Real):
            raise ConfigurationError(
                f"fuzzy_threshold must be a number in [0, 1], got {threshold!r}"
            )
        if not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(
                f"fuzzy_threshold must be in [0, 1], got {threshold!r}"
            )

        max_results = self.max_results
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise ConfigurationError(
                f"max_results must be a positive integer, got {max_results!r}"
            )
        if max_results <= 0:
            raise ConfigurationError(
                f"max_results must be a positive integer, got {max_results!r}"
            )

        if not self.fields:
            raise ConfigurationError("fields must name at least one field")

    def replace(self, **changes: Any) -> "SearchOptions":
        """Return a validated copy with some options changed."""
        return replace(self, **changes)

    @classmethod
    def for_kind(cls, kind: ContentKind, **changes: Any) -> "SearchOptions":
        """Options with the default field list for a content kind."""
        changes.setdefault("fields", KIND_DEFAULT_FIELDS[ContentKind.parse(kind)])
        return cls(**changes)


@dataclass
class SearchMatch:
    """A field that matched the query.

    Attributes:
        field: Logical field name
        spans: Merged [start, end) offsets of literal query hits in the
            scored field value (list fields joined with a space)
        score: Fuzzy score of the field
    """

    field: str
    spans: List[Span] = field(default_factory=list)
    score: float = 0.0


@dataclass
class SearchResult(Generic[T]):
    """A matched record.

    Attributes:
        item: The caller's record, not copied
        score: Mean score of the matched fields
        matches: Matched fields in configured field order
        highlights: Field name to highlighted display string
    """

    item: T
    score: float
    matches: List[SearchMatch] = field(default_factory=list)
    highlights: Optional[Dict[str, str]] = None

    @property
    def matched_fields(self) -> List[str]:
        return [match.field for match in self.matches]


class MultiFieldSearchEngine:
    """Fuzzy search over several fields of in-memory records.

    The engine holds no per-search state. Its scorer, and so the score
    cache, may be shared with other engines.
    """

    def __init__(
        self,
        scorer: Optional[FuzzyScorer] = None,
        adapter: Optional[RecordAdapter] = None,
        options: Optional[SearchOptions] = None,
    ):
        """Initialize search engine.

        Args:
            scorer: Fuzzy scorer, a fresh one is created if omitted
            adapter: Field accessor for records
            options: Default options for calls that pass none
        """
        self.scorer = scorer or FuzzyScorer()
        self.adapter = adapter or MappingAdapter()
        self.options = options or SearchOptions()
        logger.info(
            f"Search engine initialized for {self.adapter.kind.value} records"
        )

    def search(
        self,
        records: Sequence[T],
        query: str,
        options: Optional[SearchOptions] = None,
    ) -> List[SearchResult[T]]:
        """Search records for a query.

        Args:
            records: Records to search
            query: Free-text query
            options: Search options, engine defaults if omitted

        Returns:
            Results ordered by descending score, input order kept for ties

        Raises:
            ConfigurationError: If options are out of range
        """
        options = options or self.options
        options.validate()

        if not query or not query.strip():
            return []

        start_time = time.time()
        context = ScoringContext(case_sensitive=options.case_sensitive)
        results: List[SearchResult[T]] = []

        for record in records:
            result = self._score_record(record, query, options, context)
            if result is not None:
                results.append(result)

        results = sorted(results, key=lambda r: r.score, reverse=True)
        total_hits = len(results)
        results = results[:options.max_results]

        took_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"Search {query!r}: {total_hits} hits in {len(records)} records, "
            f"{took_ms:.2f}ms"
        )
        return results

    def _score_record(
        self,
        record: T,
        query: str,
        options: SearchOptions,
        context: ScoringContext,
    ) -> Optional[SearchResult[T]]:
        """Score one record, None if no field matched."""
        matches: List[SearchMatch] = []

        for field_name in options.fields:
            value = self.adapter.get_text(record, field_name)
            if not value:
                continue

            score = self.scorer.score(query, value, context)
            if score < options.fuzzy_threshold:
                continue

            spans: List[Span] = []
            if options.include_highlights:
                spans = merge_spans(find_spans(query, value, options.case_sensitive))
            matches.append(SearchMatch(field=field_name, spans=spans, score=score))

        if not matches:
            return None

        result = SearchResult(
            item=record,
            score=sum(match.score for match in matches) / len(matches),
            matches=matches,
        )
        if options.include_highlights:
            result.highlights = self._highlight(record, query, matches, options)
        return result

    def _highlight(
        self,
        record: T,
        query: str,
        matches: List[SearchMatch],
        options: SearchOptions,
    ) -> Dict[str, str]:
        """Build highlighted display strings for matched fields."""
        highlights = {}
        for match in matches:
            display = self.adapter.get_text(record, match.field, DISPLAY_SEPARATOR)
            spans = find_spans(query, display, options.case_sensitive)
            highlights[match.field] = to_markup(render_highlight(display, spans))
        return highlights

    def multi_query_search(
        self,
        records: Sequence[T],
        queries: Sequence[str],
        options: Optional[SearchOptions] = None,
    ) -> List[SearchResult[T]]:
        """Search with several queries combined with AND.

        Each query is searched on its own; only records returned for every
        query are kept, ranked as the first query ranked them.

        Args:
            records: Records to search
            queries: Queries that must all match
            options: Search options

        Returns:
            First query's results restricted to records matched by all
        """
        if not queries:
            return []

        results = self.search(records, queries[0], options)
        for query in queries[1:]:
            if not results:
                break
            matched = {id(r.item) for r in self.search(records, query, options)}
            results = [r for r in results if id(r.item) in matched]

        return results

    def suggest(
        self,
        query: str,
        recent_searches: Sequence[str],
        max_suggestions: int = 5,
    ) -> List[str]:
        """Suggest recent searches that resemble a partial query.

        Args:
            query: Partial query
            recent_searches: Previous queries, most recent first
            max_suggestions: Maximum suggestions

        Returns:
            Matching recent searches, best first
        """
        if max_suggestions <= 0:
            return []
        if not query.strip():
            return list(recent_searches[:max_suggestions])

        q = query.lower()
        scored = []
        for text in recent_searches:
            score = self.scorer.score_text(q, text)
            if score > SUGGESTION_THRESHOLD:
                scored.append((text, score))

        scored = sorted(scored, key=lambda x: x[1], reverse=True)
        return [text for text, _ in scored[:max_suggestions]]


_default_engines: Dict[ContentKind, MultiFieldSearchEngine] = {}
_default_scorer: Optional[FuzzyScorer] = None
_default_lock = threading.Lock()


def default_engine(kind: ContentKind) -> MultiFieldSearchEngine:
    """Shared engine for a content kind, built on first use.

    Engines for every kind share one FuzzyScorer, so the score cache lives
    as long as the process.
    """
    global _default_scorer

    kind = ContentKind.parse(kind)
    with _default_lock:
        engine = _default_engines.get(kind)
        if engine is None:
            if _default_scorer is None:
                _default_scorer = FuzzyScorer()
            engine = MultiFieldSearchEngine(
                scorer=_default_scorer,
                adapter=adapter_for(kind),
                options=SearchOptions.for_kind(kind),
            )
            _default_engines[kind] = engine
        return engine


def _engine_for(kind: ContentKind, scorer: Optional[FuzzyScorer]) -> MultiFieldSearchEngine:
    if scorer is None:
        return default_engine(kind)
    return MultiFieldSearchEngine(
        scorer=scorer,
        adapter=adapter_for(kind),
        options=SearchOptions.for_kind(kind),
    )


def search_narratives(
    narratives: Sequence[T],
    query: str,
    options: Optional[SearchOptions] = None,
    scorer: Optional[FuzzyScorer] = None,
) -> List[SearchResult[T]]:
    """Search narrative records with narrative defaults."""
    return _engine_for(ContentKind.NARRATIVE, scorer).search(narratives, query, options)


def search_mental_models(
    models: Sequence[T],
    query: str,
    options: Optional[SearchOptions] = None,
    scorer: Optional[FuzzyScorer] = None,
) -> List[SearchResult[T]]:
    """Search mental model records with mental model defaults."""
    return _engine_for(ContentKind.MENTAL_MODEL, scorer).search(models, query, options)


__all__ = [
    "MultiFieldSearchEngine",
    "SearchOptions",
    "SearchMatch",
    "SearchResult",
    "search_narratives",
    "search_mental_models",
    "default_engine",
    "DEFAULT_FIELDS",
    "KIND_DEFAULT_FIELDS",
]
