"""
Review Service - Ties passages, recall scoring and SM-2 scheduling together.

Main workflow for a recitation attempt:
1. Validate the submission
2. Load the palace passage
3. Evaluate the attempt (pure)
4. Log the attempt and update the schedule in one transaction
5. Return score, feedback and the next review date
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional, Union

from palace import passage_repo, sm2
from palace.recall import evaluate_attempt, split_verse_into_segments, suggest_keywords
from palace.schemas import AttemptSubmission, PassageEntry


class PassageNotFoundError(LookupError):
    """The palace does not exist or belongs to another user."""


@dataclass(frozen=True)
class AttemptOutcome:
    """What the caller shows after an attempt."""
    attempt_id: int
    score: int                    # 0-100
    quality: int                  # SM-2 quality 0-5
    feedback: str
    matched_segments: list[bool]
    missing_keywords: list[str]
    next_review_at: Optional[date] = None
    recommendation: Optional[str] = None


@dataclass(frozen=True)
class ScheduleOverview:
    """All schedules of a user plus the ones due today."""
    all: list[sm2.ReviewState] = field(default_factory=list)
    today: list[sm2.ReviewState] = field(default_factory=list)

    @property
    def today_count(self) -> int:
        return len(self.today)

    @property
    def total_count(self) -> int:
        return len(self.all)


def create_palace(entry: PassageEntry, today: Optional[date] = None) -> sm2.ReviewPreviewSchedule:
    """
    Store a new palace, create its schedule and return the preview plan.

    Difficulty is derived from the number of verse segments when the entry
    does not specify one.
    """
    if today is None:
        today = date.today()

    if entry.difficulty is None:
        segment_count = len(split_verse_into_segments(entry.verse_text))
        entry = entry.model_copy(
            update={"difficulty": sm2.difficulty_for_segment_count(segment_count)}
        )
        print(f"[PALACE] {entry.verse_ref}: {segment_count} segments -> {entry.difficulty}")

    passage_repo.insert_passage(entry)

    state = sm2.initialize_review_state(
        user_id=entry.user_id,
        palace_id=entry.palace_id,
        difficulty=entry.difficulty,
        today=today,
    )
    try:
        sm2.create_review_state(state)
    except Exception:
        print(f"[PALACE] Schedule creation failed, removing {entry.palace_id}")
        passage_repo.delete_passage(entry.user_id, entry.palace_id)
        raise

    schedule = sm2.generate_review_schedule(entry.verse_ref, entry.difficulty, today)
    print(f"[PALACE] Created {entry.palace_id} with {len(schedule.reviews)} planned reviews")
    return schedule


def delete_palace(user_id: str, palace_id: str) -> bool:
    """Delete a palace and its schedule."""
    deleted = passage_repo.delete_passage(user_id, palace_id)
    sm2.delete_review_state(user_id, palace_id)
    return deleted


def submit_attempt(
    user_id: str,
    submission: Union[AttemptSubmission, dict],
    timestamp: Optional[datetime] = None
) -> AttemptOutcome:
    """
    Score a recitation attempt and advance the palace's schedule.

    Args:
        user_id: Submitting user
        submission: AttemptSubmission or raw request body
        timestamp: Review timestamp (defaults to now)

    Returns:
        AttemptOutcome

    Raises:
        pydantic.ValidationError: If the submission is malformed
        PassageNotFoundError: If the palace is unknown
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    if not isinstance(submission, AttemptSubmission):
        submission = AttemptSubmission.model_validate(submission)

    passage = passage_repo.get_passage(user_id, submission.palace_id)
    if passage is None:
        raise PassageNotFoundError(f"Palace not found: {submission.palace_id}")

    verse_text = passage["verse_text"]
    keywords = passage.get("keywords") or suggest_keywords(verse_text)

    evaluation = evaluate_attempt(verse_text, submission.user_text, keywords)
    print(
        f"[REVIEW] {submission.palace_id}: score={evaluation.score:.2f} "
        f"quality={evaluation.quality} "
        f"segments={evaluation.details.matched_count}/{evaluation.details.total_segments}"
    )

    # Read-modify-write of the schedule under a row lock
    session = sm2.get_session()
    try:
        attempt_id = sm2.log_attempt(
            {
                'user_id': user_id,
                'palace_id': submission.palace_id,
                'user_text': submission.user_text,
                'score': evaluation.score,
                'quality': evaluation.quality,
                'feedback': evaluation.feedback,
                'created_at': timestamp,
            },
            session=session,
        )

        state = sm2.load_review_state(
            user_id,
            submission.palace_id,
            session=session,
            for_update=True,
        )

        result = None
        if state is not None:
            state, result, _ = sm2.process_review(state, evaluation.quality, timestamp)
            sm2.save_review_state(state, session=session)
        else:
            print(f"[REVIEW] No schedule for {submission.palace_id}, attempt logged only")

        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    return AttemptOutcome(
        attempt_id=attempt_id,
        score=int(sm2.round_half_up(evaluation.score * 100)),
        quality=evaluation.quality,
        feedback=evaluation.feedback,
        matched_segments=evaluation.matched_segments,
        missing_keywords=evaluation.missing_keywords,
        next_review_at=result.next_review_at if result else None,
        recommendation=result.recommendation if result else None,
    )


def get_review_schedule(user_id: str, today: Optional[date] = None) -> ScheduleOverview:
    """
    Get upcoming reviews for a user.

    Returns:
        ScheduleOverview with every schedule (soonest first) and those due today
    """
    if today is None:
        today = date.today()

    schedules = sm2.get_user_schedules(user_id)
    due_today = [s for s in schedules if sm2.is_due(s, today)]
    return ScheduleOverview(all=schedules, today=due_today)
