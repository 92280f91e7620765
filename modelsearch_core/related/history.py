"""ModelSearch Viewing History - Interest Profiles.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from modelsearch_core.records.document import ContentKind

TOP_TAGS = 5
TOP_CATEGORIES = 3


@dataclass(frozen=True)
class ViewEvent:
    """A previously viewed item.

    Attributes:
        kind: Content kind of the viewed item
        item_id: Identifier of the viewed item
        tags: Tags of the viewed item, if known
        category: Category of the viewed item, if known
    """

    kind: ContentKind
    item_id: str
    tags: Tuple[str, ...] = field(default_factory=tuple)
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewEvent":
        """Create from a stored history entry."""
        return cls(
            kind=ContentKind.parse(data.get("kind") or data.get("type") or ContentKind.NARRATIVE),
            item_id=str(data.get("itemId") or data.get("item_id") or data.get("id") or ""),
            tags=tuple(data.get("tags") or ()),
            category=data.get("category") or None,
        )


@dataclass(frozen=True)
class InterestProfile:
    """Most frequent tags and categories in a viewing history."""

    top_tags: Tuple[str, ...] = ()
    top_categories: Tuple[str, ...] = ()
    viewed_ids: FrozenSet[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.top_tags and not self.top_categories


def build_profile(
    history: Iterable[ViewEvent],
    top_tags: int = TOP_TAGS,
    top_categories: int = TOP_CATEGORIES,
) -> InterestProfile:
    """Tally tags and categories over a history.

    Counting is case-sensitive. Ties keep the order in which values were
    first seen.

    Args:
        history: Viewed items
        top_tags: Number of tags kept
        top_categories: Number of categories kept

    Returns:
        Interest profile
    """
    tag_counts: Counter = Counter()
    category_counts: Counter = Counter()
    viewed: List[str] = []

    for event in history:
        viewed.append(event.item_id)
        tag_counts.update(event.tags)
        if event.category:
            category_counts[event.category] += 1

    return InterestProfile(
        top_tags=tuple(tag for tag, _ in tag_counts.most_common(top_tags)),
        top_categories=tuple(cat for cat, _ in category_counts.most_common(top_categories)),
        viewed_ids=frozenset(viewed),
    )


__all__ = ["ViewEvent", "InterestProfile", "build_profile", "TOP_TAGS", "TOP_CATEGORIES"]
