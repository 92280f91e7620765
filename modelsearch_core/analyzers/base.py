"""ModelSearch Analyzer Base - Core Text Analysis Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class Token:
    """A token in the analysis stream."""

    text: str


class Tokenizer(ABC):
    """Base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Tokens in text order
        """
        pass


__all__ = ["Token", "Tokenizer"]
