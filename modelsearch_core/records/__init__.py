"""ModelSearch Records - Content Kinds and Field Adapters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from modelsearch_core.records.document import ContentKind, ContentItem
from modelsearch_core.records.adapters import (
    FieldValue,
    RecordAdapter,
    NarrativeAdapter,
    MentalModelAdapter,
    MappingAdapter,
    adapter_for,
    read_raw,
)

__all__ = [
    "ContentKind",
    "ContentItem",
    "FieldValue",
    "RecordAdapter",
    "NarrativeAdapter",
    "MentalModelAdapter",
    "MappingAdapter",
    "adapter_for",
    "read_raw",
]
