"""ModelSearch Highlighter - Literal Match Spans and Markup.

Highlighting only marks literal occurrences of the query. It is
independent of the fuzzy tier that admitted a record, so a record matched
through edit distance may carry no highlighted spans at all.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

Span = Tuple[int, int]

DEFAULT_OPEN_TAG = "<mark>"
DEFAULT_CLOSE_TAG = "</mark>"


@dataclass(frozen=True)
class HighlightSegment:
    """A run of text that is either plain or highlighted."""

    text: str
    highlighted: bool = False


def _fold_aligned(text: str) -> str:
    """Lowercase text without changing its length.

    Characters whose lowercase form is longer (such as "\u0130") are kept
    as they are so offsets stay valid for the original text.
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)


def find_spans(query: str, text: str, case_sensitive: bool = False) -> List[Span]:
    """Find every occurrence of query in text.

    The scan resumes at the end of each hit, so reported spans never
    overlap. Adjacent spans are left for merge_spans to join.

    Args:
        query: Literal query
        text: Text to scan
        case_sensitive: Match case exactly

    Returns:
        [start, end) offsets in ascending order
    """
    if not query or not text:
        return []

    q = query if case_sensitive else query.lower()
    t = text if case_sensitive else _fold_aligned(text)

    spans: List[Span] = []
    start = t.find(q)
    while start != -1:
        spans.append((start, start + len(q)))
        start = t.find(q, start + len(q))
    return spans


def merge_spans(spans: Iterable[Span]) -> List[Span]:
    """Sort spans and merge those that overlap or touch."""
    merged: List[List[int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return [(start, end) for start, end in merged]


def render_highlight(text: str, spans: Iterable[Span]) -> List[HighlightSegment]:
    """Split text into plain and highlighted segments.

    Joining the segment texts always reproduces ``text``. Spans are
    clipped to the text bounds.

    Args:
        text: Original text
        spans: Spans to highlight, in any order

    Returns:
        Segments covering the whole text
    """
    length = len(text)
    clipped = [
        (max(0, start), min(length, end))
        for start, end in spans
        if min(length, end) > max(0, start)
    ]
    if not clipped:
        return [HighlightSegment(text)]

    segments: List[HighlightSegment] = []
    last = 0
    for start, end in merge_spans(clipped):
        if start > last:
            segments.append(HighlightSegment(text[last:start]))
        segments.append(HighlightSegment(text[start:end], highlighted=True))
        last = end

    if last < length:
        segments.append(HighlightSegment(text[last:]))
    return segments


def to_markup(
    segments: Iterable[HighlightSegment],
    open_tag: str = DEFAULT_OPEN_TAG,
    close_tag: str = DEFAULT_CLOSE_TAG,
) -> str:
    """Join segments, wrapping highlighted ones in tags."""
    return "".join(
        f"{open_tag}{segment.text}{close_tag}" if segment.highlighted else segment.text
        for segment in segments
    )


def highlight_query(
    text: str,
    query: str,
    case_sensitive: bool = False,
) -> List[HighlightSegment]:
    """Find and render query occurrences in one step."""
    if not query.strip():
        return [HighlightSegment(text)]
    return render_highlight(text, find_spans(query, text, case_sensitive))


__all__ = [
    "Span",
    "HighlightSegment",
    "find_spans",
    "merge_spans",
    "render_highlight",
    "to_markup",
    "highlight_query",
    "DEFAULT_OPEN_TAG",
    "DEFAULT_CLOSE_TAG",
]
