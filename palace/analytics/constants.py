"""
Constants for review statistics.
"""

from __future__ import annotations

from typing import Final


MEMORIZED_SCORE_THRESHOLD: Final[float] = 0.8  # A palace counts as memorized once any attempt reaches this
UPCOMING_WINDOW_DAYS: Final[int] = 7

ATTEMPT_COLUMNS: Final[list[str]] = ["palace_id", "score", "created_at", "day_utc"]
SCHEDULE_COLUMNS: Final[list[str]] = ["palace_id", "next_review_at", "interval_days"]
