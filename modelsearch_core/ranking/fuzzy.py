"""ModelSearch Fuzzy Scorer - Tiered Query/Field Relevance.

Scores a query against a single field value using, in order:
exact equality, substring containment, word-boundary matching and
finally normalized edit distance.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from modelsearch_core.analyzers.tokenizers import WhitespaceTokenizer
from modelsearch_core.analyzers.highlighter import Span
from modelsearch_core.ranking.distance import similarity
from modelsearch_core.ranking.scorer import Scorer, ScoringContext

logger = logging.getLogger(__name__)

DEFAULT_CACHE_CAPACITY = 1000
DEFAULT_EVICT_COUNT = 100


@dataclass(frozen=True)
class FuzzyWeights:
    """Scores assigned by each matching tier."""

    exact: float = 1.0
    contains: float = 0.9
    word: float = 0.85
    word_prefix: float = 0.8
    edit_factor: float = 0.7
    edit_floor: float = 0.5


class ScoreCache:
    """Bounded memo of fuzzy scores.

    Keys are (normalized query, normalized text) pairs. When the cache is
    full the oldest ``evict_count`` insertions are dropped before the next
    insert.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CACHE_CAPACITY,
        evict_count: int = DEFAULT_EVICT_COUNT,
    ):
        """Initialize score cache.

        Args:
            capacity: Entry count that triggers eviction
            evict_count: Number of oldest entries dropped per eviction
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if evict_count <= 0:
            raise ValueError(f"evict_count must be positive, got {evict_count}")

        self.capacity = capacity
        self.evict_count = evict_count
        self._entries: Dict[Tuple[str, str], float] = {}
        self._lock = threading.Lock()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Tuple[str, str]) -> Optional[float]:
        """Look up a cached score."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: Tuple[str, str], value: float) -> None:
        """Store a score, evicting the oldest entries when full."""
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.capacity:
                # dicts keep insertion order
                for old_key in list(self._entries)[:self.evict_count]:
                    del self._entries[old_key]
                self._evictions += 1
                logger.debug(f"Score cache evicted {self.evict_count} entries")
            self._entries[key] = value

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get_statistics(self) -> Dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            return {
                "size": len(self._entries),
                "capacity": self.capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }


class FuzzyScorer(Scorer):
    """Tiered fuzzy scorer.

    Scores are always in [0, 1]. One instance is meant to be shared for
    the lifetime of an application so its cache is reused across searches.
    """

    def __init__(
        self,
        cache: Optional[ScoreCache] = None,
        weights: Optional[FuzzyWeights] = None,
    ):
        """Initialize fuzzy scorer.

        Args:
            cache: Score cache, a fresh one is created if omitted
            weights: Tier weights
        """
        self.cache = cache if cache is not None else ScoreCache()
        self.weights = weights or FuzzyWeights()
        self._words = WhitespaceTokenizer()
        logger.info(f"Fuzzy scorer created (cache capacity {self.cache.capacity})")

    @staticmethod
    def normalize(text: str, case_sensitive: bool = False) -> str:
        return text if case_sensitive else text.lower()

    def score(
        self,
        query: str,
        text: str,
        context: Optional[ScoringContext] = None,
    ) -> float:
        """Score a query against a field value.

        Args:
            query: Query string
            text: Field value
            context: Scoring context (case sensitivity)

        Returns:
            Relevance score in [0, 1]
        """
        if not query or not text:
            return 0.0

        case_sensitive = context.case_sensitive if context else False
        q = self.normalize(query, case_sensitive)
        t = self.normalize(text, case_sensitive)

        key = (q, t)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        score, _, _ = self._score_normalized(q, t)
        self.cache.put(key, score)
        return score

    def score_text(self, query: str, text: str, case_sensitive: bool = False) -> float:
        """Shorthand for scoring without building a context."""
        return self.score(query, text, ScoringContext(case_sensitive=case_sensitive))

    def _score_normalized(self, q: str, t: str) -> Tuple[float, str, Optional[Span]]:
        """Score already-normalized strings.

        Returns:
            (score, tier, span of the matched text or None)
        """
        w = self.weights

        if t == q:
            return w.exact, "exact", (0, len(t))
        start = t.find(q)
        if start != -1:
            return w.contains, "contains", (start, start + len(q))

        for word in self._words.terms(t):
            if word == q:
                return w.word, "word", None
            if word.startswith(q):
                return w.word_prefix, "word_prefix", None

        edit_similarity = similarity(q, t)
        if edit_similarity > w.edit_floor:
            return edit_similarity * w.edit_factor, "edit_distance", None
        return 0.0, "none", None

    def explain(
        self,
        query: str,
        text: str,
        context: Optional[ScoringContext] = None,
    ) -> Dict[str, Any]:
        """Explain which tier produced the score. Bypasses the cache."""
        if not query or not text:
            return {
                "score": 0.0,
                "tier": "none",
                "span": None,
                "description": "empty query or text",
            }

        case_sensitive = context.case_sensitive if context else False
        q = self.normalize(query, case_sensitive)
        t = self.normalize(text, case_sensitive)
        score, tier, span = self._score_normalized(q, t)
        return {
            "score": score,
            "tier": tier,
            "span": span,
            "description": f"fuzzy({tier}, case_sensitive={case_sensitive})",
        }


__all__ = [
    "FuzzyScorer",
    "FuzzyWeights",
    "ScoreCache",
    "DEFAULT_CACHE_CAPACITY",
    "DEFAULT_EVICT_COUNT",
]
