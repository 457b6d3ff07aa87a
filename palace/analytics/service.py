"""
Service layer to assemble a user's review statistics.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from palace import passage_repo, sm2
from palace.analytics.constants import MEMORIZED_SCORE_THRESHOLD, UPCOMING_WINDOW_DAYS
from palace.analytics.metrics import (
    calculate_streak,
    compute_average_score,
    compute_due_within,
    compute_memorized_count,
)
from palace.analytics.queries import load_attempts_df, schedules_to_df
from palace.analytics.types import ReviewStats


def build_review_stats(user_id: str, today: Optional[date] = None) -> ReviewStats:
    """
    Build all numbers needed by the review dashboard.
    """
    if today is None:
        today = date.today()

    states = sm2.get_user_schedules(user_id)
    attempts_df = load_attempts_df(user_id)
    schedules_df = schedules_to_df(states)

    upcoming = compute_due_within(
        schedules_df,
        today + timedelta(days=UPCOMING_WINDOW_DAYS)
    )

    return ReviewStats(
        total_palaces=passage_repo.count_passages(user_id),
        total_memorized=compute_memorized_count(attempts_df, MEMORIZED_SCORE_THRESHOLD),
        current_streak=calculate_streak(attempts_df, today),
        total_attempts=len(attempts_df),
        average_score=compute_average_score(attempts_df),
        upcoming_reviews=len(upcoming),
        today_reviews=[s for s in states if sm2.is_due(s, today)],
    )
