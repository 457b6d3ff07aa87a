"""
Rule-based splitter for verse text.

Breaks a passage into clause-sized segments on punctuation and common
Korean conjunctions. Separators are discarded, so joining the segments
does not reproduce the input exactly.
"""

from __future__ import annotations

import re

from palace.recall.constants import CLAUSE_MARKERS


_SEGMENT_DELIMITERS = re.compile(
    r"[,;.]\s|(?:\s+(?:" + "|".join(CLAUSE_MARKERS) + r")\s)"
)


def split_verse_into_segments(text: str) -> list[str]:
    """
    Split a verse into clause segments.

    Args:
        text: Verse text

    Returns:
        Trimmed, non-empty segments in their original order.
        Text without any boundary yields a single segment.
    """
    pieces = _SEGMENT_DELIMITERS.split(text)
    return [piece.strip() for piece in pieces if piece.strip()]
