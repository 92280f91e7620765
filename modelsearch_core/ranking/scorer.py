"""ModelSearch Scorer - Base Scoring Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

@dataclass
class ScoringContext:
    """Context for scoring operations."""
    case_sensitive: bool = False

class Scorer(ABC):
    """Base scorer class."""

    @abstractmethod
    def score(self, query: str, text: str, context: ScoringContext) -> float:
        pass

    def explain(self, query: str, text: str, context: ScoringContext) -> Dict[str, Any]:
        return {"score": self.score(query, text, context), "description": "base scorer"}

__all__ = ["Scorer", "ScoringContext"]
