"""Highlighter — turn keyword spans into a partition of the text.

Longer words are scanned first so that a phrase like "충격적인 진실"
claims its characters before the shorter "충격" can.  Once a range is
taken, any later occurrence touching it is dropped.  The accepted
matches are then laid out left to right, with plain segments filling
the gaps, so joining every segment's text gives back the input.
"""

from __future__ import annotations
import logging
from typing import Mapping, Sequence, Union

from .types import Category, HighlightSpans, Match, Segment

logger = logging.getLogger(__name__)

SpansLike = Union[HighlightSpans, Mapping[str, Sequence[str]]]


def _flatten(spans: SpansLike) -> list[tuple[str, Category]]:
    if not isinstance(spans, HighlightSpans):
        spans = HighlightSpans.from_mapping(spans)
    pairs = [(word, cat) for cat, words in spans.items() for word in words if word]
    # Stable: equal-length words keep their category/list order
    pairs.sort(key=lambda p: -len(p[0]))
    return pairs


def find_matches(text: str, spans: SpansLike) -> list[Match]:
    """Accept non-overlapping occurrences, longest words first. Sorted by start."""
    taken: list[Match] = []
    for word, category in _flatten(spans):
        index = text.find(word)
        while index != -1:
            end = index + len(word)
            if not any(m.overlaps(index, end) for m in taken):
                taken.append(Match(start=index, end=end, category=category))
            index = text.find(word, end)
    return sorted(taken, key=lambda m: m.start)


def build_segments(text: str, matches: Sequence[Match]) -> list[Segment]:
    """Lay sorted, non-overlapping matches over text as plain/highlighted segments."""
    segments: list[Segment] = []
    last = 0
    for match in matches:
        if match.start > last:
            segments.append(Segment(text[last:match.start]))
        segments.append(Segment(text[match.start:match.end], match.category))
        last = match.end
    if last < len(text):
        segments.append(Segment(text[last:]))
    return segments


def highlight(text: str, spans: SpansLike) -> list[Segment]:
    """Split text into plain and highlighted segments.

    Args:
        text: The original text.
        spans: Words per category, as a HighlightSpans or a plain
            {"exaggeration": [...], "sourceless": [...], "emotional": [...]}
            mapping.  Empty strings are ignored.
    """
    matches = find_matches(text, spans)
    logger.debug("highlight: %d matches over %d chars", len(matches), len(text))
    return build_segments(text, matches)
