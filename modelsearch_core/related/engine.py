"""ModelSearch Relatedness Engine - Related Content and Recommendations.

Scores candidate records against a focal record with additive weighted
signals (category, tags, domain, text overlap, small same-value bonuses).
Scores are relative ranking signals: several signals can fire at once, so
a score may exceed 1.0.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Set, Union

from modelsearch_core.records.adapters import RecordAdapter, adapter_for
from modelsearch_core.records.document import ContentItem, ContentKind
from modelsearch_core.related.history import InterestProfile, ViewEvent, build_profile
from modelsearch_core.related.similarity import (
    array_similarity,
    jaccard,
    normalized_set,
    text_similarity,
)

logger = logging.getLogger(__name__)

DEFAULT_REASON = "related content"
HISTORY_REASON = "based on your history"


@dataclass(frozen=True)
class NarrativeWeights:
    """Same-type weights for narratives."""

    category: float = 0.4
    tags: float = 0.3
    domain: float = 0.2
    text: float = 0.1
    quality: float = 0.05
    min_text_similarity: float = 0.05
    min_score: float = 0.1


@dataclass(frozen=True)
class ModelWeights:
    """Same-type weights for mental models."""

    category: float = 0.5
    tags: float = 0.3
    text: float = 0.2
    complexity: float = 0.05
    min_text_similarity: float = 0.05
    min_score: float = 0.1


@dataclass(frozen=True)
class CrossTypeWeights:
    """Weights for comparisons across content kinds."""

    category: float = 0.4
    tags: float = 0.4
    title: float = 0.2
    other_kind: float = 0.1
    min_title_similarity: float = 0.1
    min_score: float = 0.1


@dataclass(frozen=True)
class DiscoveryWeights:
    """Weights for "you might also like" recommendations."""

    category: float = 0.3
    tags: float = 0.5
    other_kind: float = 0.1
    min_score: float = 0.1
    recent_excluded: int = 3


@dataclass(frozen=True)
class HistoryWeights:
    """Weights for history-based recommendations."""

    category: float = 0.5
    tag: float = 0.2


@dataclass
class RelatedItem:
    """A related or recommended item.

    Attributes:
        id: Candidate identifier
        kind: Candidate content kind
        title: Display title
        score: Relative relevance; not bounded by 1.0
        reason: Signals that fired, comma separated
    """

    id: str
    kind: ContentKind
    title: str
    score: float
    reason: str = DEFAULT_REASON

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.kind.value,
            "title": self.title,
            "score": self.score,
            "reason": self.reason,
        }


def _same(a: str, b: str) -> bool:
    """Non-empty equality; two missing values never match."""
    return bool(a) and a == b


def _rank(items: List[RelatedItem], limit: int) -> List[RelatedItem]:
    if limit <= 0:
        return []
    return sorted(items, key=lambda item: item.score, reverse=True)[:limit]


class RelatednessEngine:
    """Related-content scoring for narratives and mental models.

    Same-type methods take raw records and read them through the kind's
    adapter. Cross-type and discovery methods work on ContentItem
    projections so they only see the fields every kind shares.
    """

    def __init__(
        self,
        narrative_adapter: Optional[RecordAdapter] = None,
        model_adapter: Optional[RecordAdapter] = None,
    ):
        """Initialize relatedness engine.

        Args:
            narrative_adapter: Field accessor for narrative records
            model_adapter: Field accessor for mental model records
        """
        self.adapters = {
            ContentKind.NARRATIVE: narrative_adapter or adapter_for(ContentKind.NARRATIVE),
            ContentKind.MENTAL_MODEL: model_adapter or adapter_for(ContentKind.MENTAL_MODEL),
        }
        self.narrative_weights = NarrativeWeights()
        self.model_weights = ModelWeights()
        self.cross_type_weights = CrossTypeWeights()
        self.discovery_weights = DiscoveryWeights()
        self.history_weights = HistoryWeights()

    def project(self, record: Any, kind: Union[ContentKind, str]) -> ContentItem:
        """Project a record of the given kind onto shared fields."""
        if isinstance(record, ContentItem):
            return record
        return self.adapters[ContentKind.parse(kind)].project(record)

    def project_all(
        self,
        records: Iterable[Any],
        kind: Union[ContentKind, str],
    ) -> List[ContentItem]:
        """Project many records of one kind."""
        return [self.project(record, kind) for record in records]

    def find_related(
        self,
        focal: Any,
        pool: Sequence[Any],
        kind: Union[ContentKind, str],
        limit: int = 5,
    ) -> List[RelatedItem]:
        """Find records of the same kind related to a focal record.

        Args:
            focal: Record to find relatives of
            pool: Candidate records of the same kind
            kind: Content kind of focal and pool
            limit: Maximum results

        Returns:
            Related items, best first
        """
        if ContentKind.parse(kind) is ContentKind.MENTAL_MODEL:
            return self.find_related_models(focal, pool, limit)
        return self.find_related_narratives(focal, pool, limit)

    def find_related_narratives(
        self,
        focal: Any,
        pool: Sequence[Any],
        limit: int = 5,
    ) -> List[RelatedItem]:
        """Find narratives related to a focal narrative."""
        w = self.narrative_weights
        current = self.project(focal, ContentKind.NARRATIVE)
        current_tags = normalized_set(current.tags)
        current_domain = normalized_set(current.domain)
        related: List[RelatedItem] = []

        for record in pool:
            item = self.project(record, ContentKind.NARRATIVE)
            if record is focal or (item.id and item.id == current.id):
                continue

            score = 0.0
            reasons: List[str] = []

            if _same(item.category, current.category):
                score += w.category
                reasons.append("same category")

            if score == 0 and not item.tags and not item.domain:
                continue

            tag_similarity = jaccard(current_tags, normalized_set(item.tags))
            if tag_similarity > 0:
                score += tag_similarity * w.tags
                reasons.append("similar tags")

            score += jaccard(current_domain, normalized_set(item.domain)) * w.domain

            # Text overlap cannot lift a candidate this far below the threshold
            if score < w.min_score / 2:
                continue

            summary_similarity = text_similarity(current.text, item.text)
            if summary_similarity > w.min_text_similarity:
                score += summary_similarity * w.text
                reasons.append("similar content")

            if _same(item.quality, current.quality):
                score += w.quality

            if score > w.min_score:
                related.append(RelatedItem(
                    id=item.id,
                    kind=ContentKind.NARRATIVE,
                    title=item.title,
                    score=score,
                    reason=", ".join(reasons) or DEFAULT_REASON,
                ))

        logger.debug(f"Related narratives for {current.id!r}: {len(related)} of {len(pool)}")
        return _rank(related, limit)

    def find_related_models(
        self,
        focal: Any,
        pool: Sequence[Any],
        limit: int = 5,
    ) -> List[RelatedItem]:
        """Find mental models related to a focal mental model."""
        w = self.model_weights
        current = self.project(focal, ContentKind.MENTAL_MODEL)
        current_tags = normalized_set(current.tags)
        related: List[RelatedItem] = []

        for record in pool:
            item = self.project(record, ContentKind.MENTAL_MODEL)
            if record is focal or (item.id and item.id == current.id):
                continue

            score = 0.0
            reasons: List[str] = []

            if _same(item.category, current.category):
                score += w.category
                reasons.append("same category")

            if score == 0 and (not item.tags or not current_tags):
                continue

            tag_similarity = jaccard(current_tags, normalized_set(item.tags))
            if tag_similarity > 0:
                score += tag_similarity * w.tags
                reasons.append("similar tags")

            if score < w.min_score / 2:
                continue

            if current.text and item.text:
                description_similarity = text_similarity(current.text, item.text)
                if description_similarity > w.min_text_similarity:
                    score += description_similarity * w.text
                    reasons.append("similar description")

            if _same(item.complexity, current.complexity):
                score += w.complexity

            if score > w.min_score:
                related.append(RelatedItem(
                    id=item.id,
                    kind=ContentKind.MENTAL_MODEL,
                    title=item.title,
                    score=score,
                    reason=", ".join(reasons) or DEFAULT_REASON,
                ))

        logger.debug(f"Related models for {current.id!r}: {len(related)} of {len(pool)}")
        return _rank(related, limit)

    def find_cross_type_related(
        self,
        focal: ContentItem,
        others: Sequence[ContentItem],
        limit: int = 3,
    ) -> List[RelatedItem]:
        """Find related items of any kind using shared fields only.

        Candidates of a different kind than the focal item receive a small
        bonus so that mixed lists favour discovery.

        Args:
            focal: Projected focal item
            others: Projected candidates, possibly of mixed kinds
            limit: Maximum results

        Returns:
            Related items, best first
        """
        w = self.cross_type_weights
        related: List[RelatedItem] = []

        for item in others:
            if item is focal or (item.id and item.id == focal.id and item.kind is focal.kind):
                continue

            score = 0.0
            reasons: List[str] = []

            if _same(item.category, focal.category):
                score += w.category
                reasons.append("related category")

            tag_similarity = array_similarity(focal.tags, item.tags)
            if tag_similarity > 0:
                score += tag_similarity * w.tags
                reasons.append("related topics")

            title_similarity = text_similarity(focal.title, item.title)
            if title_similarity > w.min_title_similarity:
                score += title_similarity * w.title

            if item.kind is not focal.kind:
                score += w.other_kind
                reasons.append("discover new type")

            if score > w.min_score:
                related.append(RelatedItem(
                    id=item.id,
                    kind=item.kind,
                    title=item.title,
                    score=score,
                    reason=", ".join(reasons) or DEFAULT_REASON,
                ))

        return _rank(related, limit)

    def recommend_from_history(
        self,
        history: Sequence[ViewEvent],
        narratives: Sequence[Any],
        models: Sequence[Any],
        limit: int = 5,
    ) -> List[RelatedItem]:
        """Recommend unseen items matching the interests in a history.

        Args:
            history: Previously viewed items
            narratives: Candidate narrative records
            models: Candidate mental model records
            limit: Maximum results

        Returns:
            Recommendations, best first; narratives precede models on ties
        """
        profile = build_profile(history)
        if profile.is_empty:
            return []

        candidates = (
            self.project_all(narratives, ContentKind.NARRATIVE)
            + self.project_all(models, ContentKind.MENTAL_MODEL)
        )
        recommendations: List[RelatedItem] = []
        for item in candidates:
            if item.id in profile.viewed_ids:
                continue
            score = self._history_score(item, profile)
            if score > 0:
                recommendations.append(RelatedItem(
                    id=item.id,
                    kind=item.kind,
                    title=item.title,
                    score=score,
                    reason=HISTORY_REASON,
                ))

        logger.debug(
            f"History recommendations: {len(recommendations)} candidates from "
            f"{len(history)} views"
        )
        return _rank(recommendations, limit)

    def _history_score(self, item: ContentItem, profile: InterestProfile) -> float:
        w = self.history_weights
        score = 0.0
        if item.category and item.category in profile.top_categories:
            score += w.category
        score += sum(w.tag for tag in item.tags if tag in profile.top_tags)
        return score

    def you_might_also_like(
        self,
        focal: ContentItem,
        bookmarked_ids: Iterable[str],
        recently_viewed_ids: Sequence[str],
        pool: Sequence[ContentItem],
        limit: int = 4,
    ) -> List[RelatedItem]:
        """Recommend items the user has not bookmarked or just seen.

        Args:
            focal: Projected item being viewed
            bookmarked_ids: Identifiers of bookmarked items
            recently_viewed_ids: Identifiers of viewed items, most recent first
            pool: Projected candidates of any kind
            limit: Maximum results

        Returns:
            Recommendations, best first
        """
        w = self.discovery_weights
        excluded: Set[str] = {focal.id, *bookmarked_ids}
        excluded.update(recently_viewed_ids[:w.recent_excluded])
        recommendations: List[RelatedItem] = []

        for item in pool:
            if item is focal or item.id in excluded:
                continue

            score = 0.0
            reasons: List[str] = []

            if _same(item.category, focal.category):
                score += w.category
                reasons.append("same category")

            tag_similarity = array_similarity(focal.tags, item.tags)
            if tag_similarity > 0:
                score += tag_similarity * w.tags
                reasons.append("similar topics")

            if item.kind is not focal.kind:
                score += w.other_kind
                reasons.append("discover new type")

            if score > w.min_score:
                recommendations.append(RelatedItem(
                    id=item.id,
                    kind=item.kind,
                    title=item.title,
                    score=score,
                    reason=", ".join(reasons) or DEFAULT_REASON,
                ))

        return _rank(recommendations, limit)


__all__ = [
    "RelatednessEngine",
    "RelatedItem",
    "NarrativeWeights",
    "ModelWeights",
    "CrossTypeWeights",
    "DiscoveryWeights",
    "HistoryWeights",
]
