"""
SM-2 - Spaced repetition scheduler for memory palaces

Main API for scheduling passage reviews.

This module implements a modified SM-2 algorithm with:
- Fixed graduated intervals (1, 3, 7, 14, 30 days)
- Exponential growth by ease factor afterwards
- Full reset on failed recall (quality < 3)
- Fixed-shape preview schedules per difficulty tier

Quick start:
    from palace import sm2

    # Initialize database
    sm2.init_db()

    # Compute the next review (algorithm only, no DB calls)
    result = sm2.calculate_next_review(quality=5, repetition_num=0,
                                       ease_factor=2.5, interval_days=1)

    # Preview plan for a new palace
    plan = sm2.generate_review_schedule("요한복음 15:5", "easy", date.today())
"""

# Core scheduler API (algorithm logic)
from palace.sm2.scheduler import (
    SM2Result,
    calculate_next_review,
    process_review,
    round_half_up,
    score_to_quality,
    update_ease_factor,
)
from palace.sm2.preview import (
    PreviewReview,
    ReviewPreviewSchedule,
    build_preview_reviews,
    difficulty_for_segment_count,
    generate_review_schedule,
)

# Database API
from palace.sm2.database import (
    get_database_url,
    get_engine,
    init_db,
    reset_db,
    count_rows,
    is_test_mode,
    get_default_user_id,
    get_session,
    create_review_state,
    load_review_state,
    save_review_state,
    delete_review_state,
    get_user_schedules,
    get_due_schedules,
    log_attempt,
    get_attempts,
)

# Constants and parameters
from palace.sm2.constants import (
    RecallQuality,
    Difficulty,
    DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    PASS_QUALITY,
    GRADUATED_INTERVALS,
    PREVIEW_INTERVALS,
)

# Schedule state
from palace.sm2.review_state import (
    ReviewState,
    initialize_review_state,
    is_due,
)


__all__ = [
    # Core algorithm
    "SM2Result",
    "calculate_next_review",
    "process_review",
    "round_half_up",
    "score_to_quality",
    "update_ease_factor",

    # Preview
    "PreviewReview",
    "ReviewPreviewSchedule",
    "build_preview_reviews",
    "difficulty_for_segment_count",
    "generate_review_schedule",

    # Database operations
    "get_database_url",
    "get_engine",
    "init_db",
    "reset_db",
    "count_rows",
    "is_test_mode",
    "get_default_user_id",
    "get_session",
    "create_review_state",
    "load_review_state",
    "save_review_state",
    "delete_review_state",
    "get_user_schedules",
    "get_due_schedules",
    "log_attempt",
    "get_attempts",

    # Enums
    "RecallQuality",
    "Difficulty",

    # Schedule state
    "ReviewState",
    "initialize_review_state",
    "is_due",

    # Parameters
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "DEFAULT_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "PASS_QUALITY",
    "GRADUATED_INTERVALS",
    "PREVIEW_INTERVALS",
]
