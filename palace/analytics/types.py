"""
Types for review statistics.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from palace.sm2 import ReviewState


@dataclass(frozen=True)
class ReviewStats:
    """
    Summary numbers for a user's review dashboard.
    """
    total_palaces: int
    total_memorized: int
    current_streak: int
    total_attempts: int
    average_score: int          # 0-100
    upcoming_reviews: int       # Due within the upcoming window
    today_reviews: list[ReviewState] = field(default_factory=list)
