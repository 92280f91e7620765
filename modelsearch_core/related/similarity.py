"""ModelSearch Set Similarity - Jaccard Overlap Helpers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Iterable

from modelsearch_core.analyzers.tokenizers import word_set


def normalized_set(values: Iterable[str]) -> FrozenSet[str]:
    """Lowercased set of non-empty values."""
    return frozenset(v.lower() for v in values if v)


def jaccard(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Intersection size over union size, 0 when either set is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def array_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Case-insensitive Jaccard similarity of two string sequences."""
    return jaccard(normalized_set(a), normalized_set(b))


def text_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the word sets of two texts."""
    return jaccard(word_set(text1), word_set(text2))


__all__ = ["normalized_set", "jaccard", "array_similarity", "text_similarity"]
