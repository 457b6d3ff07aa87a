"""
Analytics package exports.
"""

from palace.analytics.constants import MEMORIZED_SCORE_THRESHOLD, UPCOMING_WINDOW_DAYS
from palace.analytics.service import build_review_stats
from palace.analytics.types import ReviewStats

__all__ = [
    "MEMORIZED_SCORE_THRESHOLD",
    "UPCOMING_WINDOW_DAYS",
    "build_review_stats",
    "ReviewStats",
]
