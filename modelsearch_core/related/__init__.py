"""ModelSearch Related Content - Relatedness and Recommendations.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from modelsearch_core.related.engine import (
    RelatednessEngine,
    RelatedItem,
    NarrativeWeights,
    ModelWeights,
    CrossTypeWeights,
    DiscoveryWeights,
    HistoryWeights,
)
from modelsearch_core.related.history import ViewEvent, InterestProfile, build_profile
from modelsearch_core.related.similarity import jaccard, array_similarity, text_similarity

__all__ = [
    "RelatednessEngine",
    "RelatedItem",
    "NarrativeWeights",
    "ModelWeights",
    "CrossTypeWeights",
    "DiscoveryWeights",
    "HistoryWeights",
    "ViewEvent",
    "InterestProfile",
    "build_profile",
    "jaccard",
    "array_similarity",
    "text_similarity",
]
