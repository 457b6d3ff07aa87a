"""
Preview - Fixed-shape review plan generated at palace creation.

Independent of the live SM-2 state: each difficulty tier maps to a fixed
list of day offsets and a parallel list of recommendations.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, timedelta

from palace.sm2.constants import (
    HARD_SEGMENT_THRESHOLD,
    MODERATE_SEGMENT_THRESHOLD,
    PREVIEW_FALLBACK_RECOMMENDATION,
    PREVIEW_INTERVALS,
    PREVIEW_RECOMMENDATIONS,
)


@dataclass(frozen=True)
class PreviewReview:
    """One planned review in a preview schedule."""
    review_number: int
    date: date
    days_after_start: int
    recommendation: str


@dataclass(frozen=True)
class ReviewPreviewSchedule:
    """Forward preview of reviews for a passage."""
    verse_ref: str
    difficulty: str
    start_date: date
    reviews: list[PreviewReview] = field(default_factory=list)


def difficulty_for_segment_count(segment_count: int) -> str:
    """Longer passages (more clauses) get a denser schedule."""
    if segment_count > HARD_SEGMENT_THRESHOLD:
        return "hard"
    if segment_count > MODERATE_SEGMENT_THRESHOLD:
        return "moderate"
    return "easy"


def build_preview_reviews(
    offsets: list[int],
    recommendations: list[str],
    start_date: date
) -> list[PreviewReview]:
    """
    Pair each day offset with its recommendation.

    Offsets without a matching recommendation get the generic fallback.
    """
    reviews = []
    for idx, days in enumerate(offsets):
        if idx < len(recommendations):
            recommendation = recommendations[idx]
        else:
            recommendation = PREVIEW_FALLBACK_RECOMMENDATION

        reviews.append(
            PreviewReview(
                review_number=idx + 1,
                date=start_date + timedelta(days=days),
                days_after_start=days,
                recommendation=recommendation,
            )
        )
    return reviews


def generate_review_schedule(
    verse_ref: str,
    difficulty: str,
    start_date: date
) -> ReviewPreviewSchedule:
    """
    Generate the full preview schedule for a passage.

    Args:
        verse_ref: Passage reference (e.g. "요한복음 15:5")
        difficulty: "easy", "moderate" or "hard"
        start_date: Palace creation date

    Returns:
        ReviewPreviewSchedule with one entry per planned review

    Raises:
        ValueError: If difficulty is not a known tier
    """
    if difficulty not in PREVIEW_INTERVALS:
        raise ValueError(
            f"Unknown difficulty: {difficulty!r} "
            f"(expected one of {sorted(PREVIEW_INTERVALS)})"
        )

    reviews = build_preview_reviews(
        PREVIEW_INTERVALS[difficulty],
        PREVIEW_RECOMMENDATIONS.get(difficulty, []),
        start_date,
    )

    return ReviewPreviewSchedule(
        verse_ref=verse_ref,
        difficulty=difficulty,
        start_date=start_date,
        reviews=reviews,
    )
