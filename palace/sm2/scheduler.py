"""
Scheduler - SM-2 Algorithm Logic

Pure SM-2 scheduling and state updates (no database calls).

State machine over (repetition_num, ease_factor, interval_days):
- quality < 3  -> reset to repetition 0, interval 1
- quality >= 3 -> repetition + 1, graduated 1/3/7/14/30 day intervals,
                  then interval * ease once past graduation

The ease factor is updated on every call before branching, and the
exponential regime multiplies the previous interval by the new ease.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple
import math

from palace.sm2.constants import (
    EASE_DECIMALS,
    FAIL_RECOMMENDATION,
    GRADUATED_INTERVALS,
    GRADUATED_RECOMMENDATIONS,
    HARD_PASS_HINT,
    INITIAL_INTERVAL_DAYS,
    LONG_TERM_RECOMMENDATION,
    MIN_EASE_FACTOR,
    PASS_QUALITY,
    PERFECT_SUFFIX,
    QUALITY_MAX,
    QUALITY_MIN,
    RecallQuality,
)
from palace.sm2.review_state import ReviewState


@dataclass(frozen=True)
class SM2Result:
    """Next schedule state produced by one review."""
    repetition_num: int
    ease_factor: float
    interval_days: int
    next_review_at: date
    recommendation: str


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round with halves going up (2.5 -> 3), unlike Python's banker's rounding.

    Quality and interval rounding must not depend on the parity of the
    integer part.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def score_to_quality(score: float) -> int:
    """
    Convert a session score (0.0-1.0) to SM-2 quality (0-5).

    Scores outside [0, 1] are clamped first.
    """
    clamped = min(1.0, max(0.0, score))
    return int(round_half_up(clamped * QUALITY_MAX))


def update_ease_factor(ease_factor: float, quality: int) -> float:
    """
    Standard SM-2 ease update, floored at 1.3.

    Formula: EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    """
    miss = QUALITY_MAX - quality
    new_ease = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(MIN_EASE_FACTOR, new_ease)


def calculate_next_review(
    quality: int,
    repetition_num: int,
    ease_factor: float,
    interval_days: int,
    today: Optional[date] = None
) -> SM2Result:
    """
    Calculate the next review using the SM-2 algorithm.

    Inputs outside the documented domain are clamped so the invariants
    (ease >= 1.3, interval >= 1) always hold.

    Args:
        quality: Recall quality (0-5)
        repetition_num: Consecutive successful reviews so far
        ease_factor: Current ease factor
        interval_days: Current interval in days
        today: Review date (defaults to today)

    Returns:
        SM2Result with the new state, due date and a recommendation
    """
    if today is None:
        today = date.today()

    quality = int(min(QUALITY_MAX, max(QUALITY_MIN, quality)))
    repetition_num = max(0, int(repetition_num))
    ease_factor = max(MIN_EASE_FACTOR, float(ease_factor))
    interval_days = max(INITIAL_INTERVAL_DAYS, int(interval_days))

    new_ease = update_ease_factor(ease_factor, quality)

    if quality < PASS_QUALITY:
        # Recall failed -> start the graduated sequence over
        new_repetition = 0
        new_interval = INITIAL_INTERVAL_DAYS
        recommendation = FAIL_RECOMMENDATION
    else:
        new_repetition = repetition_num + 1

        if new_repetition in GRADUATED_INTERVALS:
            new_interval = GRADUATED_INTERVALS[new_repetition]
            recommendation = GRADUATED_RECOMMENDATIONS[new_repetition]
        else:
            new_interval = max(
                INITIAL_INTERVAL_DAYS,
                int(round_half_up(interval_days * new_ease))
            )
            recommendation = LONG_TERM_RECOMMENDATION.format(interval=new_interval)

        if quality == RecallQuality.HARD_PASS:
            recommendation += HARD_PASS_HINT
        elif quality == RecallQuality.PERFECT:
            recommendation += PERFECT_SUFFIX

    return SM2Result(
        repetition_num=new_repetition,
        ease_factor=round_half_up(new_ease, EASE_DECIMALS),
        interval_days=new_interval,
        next_review_at=today + timedelta(days=new_interval),
        recommendation=recommendation,
    )


def process_review(
    state: ReviewState,
    quality: int,
    timestamp: Optional[datetime] = None
) -> Tuple[ReviewState, SM2Result, dict]:
    """
    Apply a review to a schedule and return updated state + event data.

    No database calls. Caller is responsible for:
    1. Loading the schedule
    2. Saving the schedule after review
    3. Persisting the event

    Args:
        state: ReviewState to update (modified in place)
        quality: Recall quality (0-5)
        timestamp: Review timestamp (defaults to now)

    Returns:
        Tuple of (updated_state, sm2_result, event_data_dict)
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    # Save state before update (for logging)
    repetition_before = state.repetition_num
    ease_before = state.ease_factor
    interval_before = state.interval_days

    result = calculate_next_review(
        quality=quality,
        repetition_num=state.repetition_num,
        ease_factor=state.ease_factor,
        interval_days=state.interval_days,
        today=timestamp.date(),
    )

    state.repetition_num = result.repetition_num
    state.ease_factor = result.ease_factor
    state.interval_days = result.interval_days
    state.next_review_at = result.next_review_at
    state.last_reviewed_at = timestamp

    event_data = {
        'user_id': state.user_id,
        'palace_id': state.palace_id,
        'timestamp': timestamp,
        'quality': quality,
        'repetition_before': repetition_before,
        'ease_before': ease_before,
        'interval_before': interval_before,
        'repetition_after': state.repetition_num,
        'ease_after': state.ease_factor,
        'interval_after': state.interval_days,
        'next_review_at': state.next_review_at,
    }

    return state, result, event_data
