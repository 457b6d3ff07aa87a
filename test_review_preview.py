"""
Tests for the fixed-shape review preview generated at palace creation.
"""

from datetime import date, timedelta

import pytest

from palace import sm2
from palace.sm2.constants import PREVIEW_FALLBACK_RECOMMENDATION


START = date(2026, 1, 1)


def test_easy_preview_offsets_and_dates():
    schedule = sm2.generate_review_schedule("요한복음 15:5", "easy", START)

    assert schedule.verse_ref == "요한복음 15:5"
    assert schedule.difficulty == "easy"
    assert schedule.start_date == START
    assert [r.days_after_start for r in schedule.reviews] == [1, 3, 7, 14, 30, 60]
    assert schedule.reviews[0].date == date(2026, 1, 2)
    assert schedule.reviews[-1].date == date(2026, 3, 2)
    assert schedule.reviews[-1].recommendation.startswith("자연스럽게 떠오르면 성공")


@pytest.mark.parametrize(
    "difficulty, offsets",
    [
        ("easy", [1, 3, 7, 14, 30, 60]),
        ("moderate", [1, 2, 5, 10, 20, 40]),
        ("hard", [1, 1, 3, 5, 10, 20, 30]),
    ],
)
def test_preview_shape_per_tier(difficulty, offsets):
    schedule = sm2.generate_review_schedule("시편 23:1", difficulty, START)

    assert len(schedule.reviews) == len(offsets)
    for idx, (review, days) in enumerate(zip(schedule.reviews, offsets)):
        assert review.review_number == idx + 1
        assert review.days_after_start == days
        assert review.date == START + timedelta(days=days)
        assert review.recommendation


def test_hard_preview_has_two_reviews_on_day_one():
    schedule = sm2.generate_review_schedule("로마서 8:28", "hard", START)
    assert schedule.reviews[0].date == schedule.reviews[1].date


def test_missing_recommendations_use_fallback():
    reviews = sm2.build_preview_reviews([1, 2, 4], ["처음"], START)

    assert [r.recommendation for r in reviews] == [
        "처음",
        PREVIEW_FALLBACK_RECOMMENDATION,
        PREVIEW_FALLBACK_RECOMMENDATION,
    ]


def test_unknown_difficulty_raises():
    with pytest.raises(ValueError, match="Unknown difficulty"):
        sm2.generate_review_schedule("요한복음 3:16", "extreme", START)


@pytest.mark.parametrize(
    "segment_count, difficulty",
    [(0, "easy"), (5, "easy"), (6, "moderate"), (10, "moderate"), (11, "hard")],
)
def test_difficulty_for_segment_count(segment_count, difficulty):
    assert sm2.difficulty_for_segment_count(segment_count) == difficulty
