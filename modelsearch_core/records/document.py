"""ModelSearch Records - Content Kinds and Projected Items.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class ContentKind(Enum):
    """Kinds of searchable content."""

    NARRATIVE = "narrative"
    MENTAL_MODEL = "mentalModel"

    @classmethod
    def parse(cls, value: Any) -> "ContentKind":
        """Accept a member, its value or its name."""
        if isinstance(value, cls):
            return value
        for kind in cls:
            if value in (kind.value, kind.name):
                return kind
        raise ValueError(f"Unknown content kind: {value!r}")


@dataclass(frozen=True)
class ContentItem:
    """Common projection of a record used for relatedness scoring.

    Attributes:
        id: Stable record identifier
        kind: Content kind
        title: Display title
        text: Summary or description text
        category: Category (transformation for models)
        tags: Tags in record order
        domain: Domains in record order (narratives)
        quality: Evidence quality grade (narratives)
        complexity: Complexity level (models)
    """

    id: str
    kind: ContentKind
    title: str = ""
    text: str = ""
    category: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    domain: Tuple[str, ...] = field(default_factory=tuple)
    quality: str = ""
    complexity: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "title": self.title,
            "text": self.text,
            "category": self.category,
            "tags": list(self.tags),
            "domain": list(self.domain),
            "quality": self.quality,
            "complexity": self.complexity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentItem":
        """Create from dictionary."""
        return cls(
            id=str(data.get("id", "")),
            kind=ContentKind.parse(data.get("kind", ContentKind.NARRATIVE)),
            title=data.get("title") or "",
            text=data.get("text") or "",
            category=data.get("category") or "",
            tags=tuple(data.get("tags") or ()),
            domain=tuple(data.get("domain") or ()),
            quality=data.get("quality") or "",
            complexity=data.get("complexity") or "",
        )


__all__ = ["ContentKind", "ContentItem"]
