"""ModelSearch Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from modelsearch_core.ranking.scorer import Scorer, ScoringContext
from modelsearch_core.ranking.distance import levenshtein, similarity
from modelsearch_core.ranking.fuzzy import FuzzyScorer, FuzzyWeights, ScoreCache, DEFAULT_CACHE_CAPACITY, DEFAULT_EVICT_COUNT

__all__ = ["Scorer", "ScoringContext", "levenshtein", "similarity", "FuzzyScorer", "FuzzyWeights", "ScoreCache", "DEFAULT_CACHE_CAPACITY", "DEFAULT_EVICT_COUNT"]
