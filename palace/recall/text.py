"""
Text normalization and character-level similarity.

Passages mix Hangul and other scripts, so comparisons work on characters
(Levenshtein distance) instead of word tokens. The distance comes from
rapidfuzz; segment matching calls it once per window position.
"""

from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein

from palace.recall.constants import PUNCTUATION_CHARS


_PUNCTUATION_RE = re.compile("[" + re.escape(PUNCTUATION_CHARS) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    - Remove punctuation (ASCII, CJK brackets, quote variants)
    - Collapse whitespace runs to a single space
    - Trim and lowercase
    """
    text = _PUNCTUATION_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip().lower()


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning a into b."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """
    Similarity between two strings in [0, 1].

    1 - distance / length of the longer string; two empty strings are identical.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len
