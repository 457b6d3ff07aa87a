"""
Review State - SM-2 Schedule State for One Palace

Defines the per-(user, palace) schedule that the scheduler reads and updates.

Key concepts:
- Repetition number: consecutive successful reviews since the last reset
- Ease factor: multiplier for interval growth (never below 1.3)
- Interval: days until the next review
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from palace.sm2.constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_EASE_FACTOR,
    INITIAL_INTERVAL_DAYS,
    INITIAL_REPETITION,
)


@dataclass
class ReviewState:
    """
    Schedule state for a single memorized passage.

    A schedule is defined as: (user_id, palace_id)
    """
    user_id: str
    palace_id: str
    difficulty: str

    # SM-2 parameters (persistent)
    repetition_num: int
    ease_factor: float
    interval_days: int

    # Review tracking
    next_review_at: date
    last_reviewed_at: Optional[datetime] = None


def initialize_review_state(
    user_id: str,
    palace_id: str,
    difficulty: str = DEFAULT_DIFFICULTY,
    today: Optional[date] = None
) -> ReviewState:
    """
    Initialize the schedule for a newly created palace.

    New palaces are due tomorrow with the default SM-2 parameters.

    Args:
        user_id: Owner of the palace
        palace_id: Palace identifier
        difficulty: Preview tier chosen at creation time
        today: Creation date (defaults to today)

    Returns:
        New ReviewState
    """
    if today is None:
        today = date.today()

    return ReviewState(
        user_id=user_id,
        palace_id=palace_id,
        difficulty=difficulty,
        repetition_num=INITIAL_REPETITION,
        ease_factor=DEFAULT_EASE_FACTOR,
        interval_days=INITIAL_INTERVAL_DAYS,
        next_review_at=today + timedelta(days=INITIAL_INTERVAL_DAYS),
        last_reviewed_at=None,
    )


def is_due(state: ReviewState, today: Optional[date] = None) -> bool:
    """True when the passage should be reviewed today (or is overdue)."""
    if today is None:
        today = date.today()
    return state.next_review_at <= today
