"""ModelSearch Record Adapters - Field Access by Record Kind.

Adapters are the only place that knows how a record stores its fields.
Engines ask an adapter for a logical field ("title", "tags", ...) and get
back either a string or a list of strings. Records may be mappings
(decoded JSON) or plain objects.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple, Union

from modelsearch_core.records.document import ContentItem, ContentKind

logger = logging.getLogger(__name__)

FieldValue = Union[str, List[str]]


def read_raw(record: Any, name: str) -> Any:
    """Read a raw attribute or key, None if absent."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        # Nested structures are not searchable text
        return ""
    return str(value)


class RecordAdapter(ABC):
    """Maps logical field names onto a record's stored fields.

    Subclasses set the class attributes; the access logic is shared.

    Attributes:
        kind: Content kind of records read through this adapter
        id_field: Raw field holding the identifier
        aliases: Logical field name to raw field names, tried in order
        list_fields: Logical fields that hold sequences of strings
    """

    kind: ClassVar[ContentKind] = ContentKind.NARRATIVE
    id_field: ClassVar[str] = "id"
    aliases: ClassVar[Dict[str, Tuple[str, ...]]] = {}
    list_fields: ClassVar[FrozenSet[str]] = frozenset({"tags", "domain"})

    def identifier(self, record: Any) -> str:
        """Get the record identifier, empty if missing."""
        value = read_raw(record, self.id_field)
        if value is None:
            logger.warning(f"{type(self).__name__}: record has no {self.id_field!r}")
            return ""
        return str(value)

    def raw(self, record: Any, field: str) -> Any:
        """Read the first present raw field for a logical field."""
        for name in self.aliases.get(field, (field,)):
            value = read_raw(record, name)
            if value is not None and value != "":
                return value
        return None

    def get(self, record: Any, field: str) -> FieldValue:
        """Get a logical field as a string or a list of strings.

        Args:
            record: Record to read
            field: Logical field name

        Returns:
            List for list fields or list-valued raw data, string otherwise
        """
        value = self.raw(record, field)
        if field in self.list_fields or isinstance(value, (list, tuple, set, frozenset)):
            return _as_list(value)
        return _as_text(value)

    def get_text(self, record: Any, field: str, separator: str = " ") -> str:
        """Get a logical field flattened to one string."""
        value = self.get(record, field)
        if isinstance(value, list):
            return separator.join(value)
        return value

    def project(self, record: Any) -> ContentItem:
        """Project a record onto the fields shared by all kinds."""
        return ContentItem(
            id=self.identifier(record),
            kind=self.kind,
            title=self.get_text(record, "title"),
            text=self.get_text(record, "summary"),
            category=self.get_text(record, "category"),
            tags=tuple(self.get(record, "tags")),
            domain=tuple(self.get(record, "domain")),
            quality=self.get_text(record, "quality"),
            complexity=self.get_text(record, "complexity"),
        )


class NarrativeAdapter(RecordAdapter):
    """Narrative-shaped records (narrative_id, summary, evidence_quality)."""

    kind = ContentKind.NARRATIVE
    id_field = "narrative_id"
    aliases = {
        "id": ("narrative_id",),
        "quality": ("evidence_quality",),
    }


class MentalModelAdapter(RecordAdapter):
    """Mental-model-shaped records (code, name, definition, transformation)."""

    kind = ContentKind.MENTAL_MODEL
    id_field = "code"
    aliases = {
        "id": ("code",),
        "title": ("name", "title"),
        "summary": ("definition", "description"),
        "description": ("definition", "description"),
        "category": ("transformation", "category"),
    }


class MappingAdapter(RecordAdapter):
    """Generic records keyed by "id", with a configurable kind."""

    def __init__(self, kind: Optional[ContentKind] = None, id_field: str = "id"):
        self.kind = kind or ContentKind.NARRATIVE
        self.id_field = id_field


_ADAPTERS: Dict[ContentKind, RecordAdapter] = {
    ContentKind.NARRATIVE: NarrativeAdapter(),
    ContentKind.MENTAL_MODEL: MentalModelAdapter(),
}


def adapter_for(kind: Union[ContentKind, str]) -> RecordAdapter:
    """Get the shared adapter for a content kind."""
    return _ADAPTERS[ContentKind.parse(kind)]


__all__ = [
    "FieldValue",
    "RecordAdapter",
    "NarrativeAdapter",
    "MentalModelAdapter",
    "MappingAdapter",
    "adapter_for",
    "read_raw",
]
