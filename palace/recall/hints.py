"""
Progressive hints during a recitation test.

Each hint reveals the next locus of the palace with its keyword and image.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class HintLocus:
    """Locus information needed to build a hint."""
    locus_index: int
    locus_name: str
    emoji: str
    keyword: str
    image_description: str


@dataclass(frozen=True)
class HintResult:
    hint: str
    locus_name: str
    emoji: str
    locus_index: int


def get_hint(loci: Sequence[HintLocus], revealed_count: int) -> Optional[HintResult]:
    """
    Return the next hint, or None once every locus has been revealed.

    Args:
        loci: Loci in walking order
        revealed_count: Number of hints already shown
    """
    if revealed_count < 0 or revealed_count >= len(loci):
        return None

    locus = loci[revealed_count]
    return HintResult(
        hint=f'{locus.emoji} {locus.locus_name}에서 "{locus.keyword}" — {locus.image_description}',
        locus_name=locus.locus_name,
        emoji=locus.emoji,
        locus_index=locus.locus_index,
    )
