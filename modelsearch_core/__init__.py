"""ModelSearch - Fuzzy Search and Related Content for Mental Models.

In-memory search and relatedness scoring over narrative and mental model
records. Records are supplied by the caller; nothing is indexed or
persisted.

Architecture:
┌──────────────────────────────────────────────────────────────────┐
│                   MultiFieldSearchEngine                         │
│   per record, per field:                                         │
│   ┌────────────┐   ┌─────────────┐   ┌────────────────────────┐  │
│   │  Record    │ → │ FuzzyScorer │ → │ threshold, mean, rank  │  │
│   │  Adapter   │   │ (+ cache)   │   └────────────────────────┘  │
│   └────────────┘   └──────┬──────┘               │               │
│                           ↓                      ↓               │
│                    ┌─────────────┐      ┌─────────────────┐      │
│                    │ levenshtein │      │   Highlighter   │      │
│                    └─────────────┘      └─────────────────┘      │
├──────────────────────────────────────────────────────────────────┤
│                   RelatednessEngine                              │
│   category / tag / domain / text overlap → RelatedItem           │
│   cross-type, history and "you might also like" variants         │
└──────────────────────────────────────────────────────────────────┘

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from modelsearch_core.engine import (
    MultiFieldSearchEngine,
    SearchOptions,
    SearchMatch,
    SearchResult,
    search_narratives,
    search_mental_models,
    default_engine,
)
from modelsearch_core.errors import ModelSearchError, ConfigurationError

# Ranking
from modelsearch_core.ranking import (
    Scorer,
    ScoringContext,
    FuzzyScorer,
    FuzzyWeights,
    ScoreCache,
    levenshtein,
    similarity,
)

# Analyzers
from modelsearch_core.analyzers import (
    HighlightSegment,
    find_spans,
    merge_spans,
    render_highlight,
    to_markup,
    highlight_query,
)

# Records
from modelsearch_core.records import (
    ContentKind,
    ContentItem,
    RecordAdapter,
    NarrativeAdapter,
    MentalModelAdapter,
    MappingAdapter,
    adapter_for,
)

# Related content
from modelsearch_core.related import (
    RelatednessEngine,
    RelatedItem,
    ViewEvent,
    InterestProfile,
    build_profile,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "MultiFieldSearchEngine",
    "SearchOptions",
    "SearchMatch",
    "SearchResult",
    "search_narratives",
    "search_mental_models",
    "default_engine",
    "ModelSearchError",
    "ConfigurationError",
    # Ranking
    "Scorer",
    "ScoringContext",
    "FuzzyScorer",
    "FuzzyWeights",
    "ScoreCache",
    "levenshtein",
    "similarity",
    # Analyzers
    "HighlightSegment",
    "find_spans",
    "merge_spans",
    "render_highlight",
    "to_markup",
    "highlight_query",
    # Records
    "ContentKind",
    "ContentItem",
    "RecordAdapter",
    "NarrativeAdapter",
    "MentalModelAdapter",
    "MappingAdapter",
    "adapter_for",
    # Related
    "RelatednessEngine",
    "RelatedItem",
    "ViewEvent",
    "InterestProfile",
    "build_profile",
]
