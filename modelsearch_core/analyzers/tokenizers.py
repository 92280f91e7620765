"""ModelSearch Tokenizers - Text Tokenization Strategies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import FrozenSet, List

from modelsearch_core.analyzers.base import Token, Tokenizer


class PatternTokenizer(Tokenizer):
    """Pattern-based tokenizer.

    Splits text on a regex pattern, dropping empty parts.
    """

    def __init__(self, pattern: str, lowercase: bool = False):
        """Initialize tokenizer.

        Args:
            pattern: Regex pattern to split on
            lowercase: Lowercase token text
        """
        self.pattern = re.compile(pattern)
        self.lowercase = lowercase

    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text using pattern."""
        tokens = []
        offset = 0

        for match in self.pattern.finditer(text):
            if match.start() > offset:
                tokens.append(self._make_token(text[offset:match.start()]))
            offset = match.end()

        # Last token
        if offset < len(text):
            tokens.append(self._make_token(text[offset:]))

        return tokens

    def _make_token(self, part: str) -> Token:
        return Token(part.lower() if self.lowercase else part)

    def terms(self, text: str) -> List[str]:
        """Token texts only."""
        return [token.text for token in self.tokenize(text)]


class WhitespaceTokenizer(PatternTokenizer):
    """Splits text on runs of whitespace, preserving punctuation."""

    def __init__(self, lowercase: bool = False):
        super().__init__(r"\s+", lowercase=lowercase)


class WordTokenizer(PatternTokenizer):
    """Splits text on runs of non-word characters, lowercasing tokens."""

    def __init__(self):
        super().__init__(r"\W+", lowercase=True)


_words = WordTokenizer()


def word_set(text: str) -> FrozenSet[str]:
    """Lowercased set of words in text."""
    if not text:
        return frozenset()
    return frozenset(_words.terms(text))


__all__ = ["PatternTokenizer", "WhitespaceTokenizer", "WordTokenizer", "word_set"]
