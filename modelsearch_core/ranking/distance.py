"""ModelSearch Edit Distance - Levenshtein Distance.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List

# Length ratio above which two strings are treated as maximally dissimilar
MAX_LENGTH_SKEW = 0.5


def levenshtein(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance.

    Strings whose lengths differ by more than half of the longer length
    are not compared; the longer length is returned instead.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Number of single-character insertions, deletions and substitutions
    """
    len1 = len(s1)
    len2 = len(s2)

    if len1 == 0:
        return len2
    if len2 == 0:
        return len1
    if s1 == s2:
        return 0

    max_len = max(len1, len2)
    min_len = min(len1, len2)
    if (max_len - min_len) / max_len > MAX_LENGTH_SKEW:
        return max_len

    # Rows run over the shorter string
    if len1 < len2:
        s1, s2 = s2, s1

    previous_row: List[int] = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: str, s2: str) -> float:
    """Normalized edit similarity in [0, 1]."""
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein(s1, s2) / max_len


__all__ = ["levenshtein", "similarity", "MAX_LENGTH_SKEW"]
