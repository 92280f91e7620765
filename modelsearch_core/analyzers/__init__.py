"""ModelSearch Analyzers - Tokenization and Highlighting.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from modelsearch_core.analyzers.base import (
    Token,
    Tokenizer,
)
from modelsearch_core.analyzers.tokenizers import (
    PatternTokenizer,
    WhitespaceTokenizer,
    WordTokenizer,
    word_set,
)
from modelsearch_core.analyzers.highlighter import (
    HighlightSegment,
    find_spans,
    merge_spans,
    render_highlight,
    to_markup,
    highlight_query,
)

__all__ = [
    "Token",
    "Tokenizer",
    "PatternTokenizer",
    "WhitespaceTokenizer",
    "WordTokenizer",
    "word_set",
    "HighlightSegment",
    "find_spans",
    "merge_spans",
    "render_highlight",
    "to_markup",
    "highlight_query",
]
