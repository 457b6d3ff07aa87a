"""
Tests for the SM-2 interval scheduler.

Verifies:
1. Ease factor update and its 1.3 floor
2. Fail resets (quality < 3)
3. Graduated intervals 1, 3, 7, 14, 30
4. Exponential regime after graduation
5. Quality mapping from session scores
"""

from datetime import date, datetime, timezone

import pytest

from palace import sm2
from palace.sm2.constants import (
    FAIL_RECOMMENDATION,
    GRADUATED_RECOMMENDATIONS,
    HARD_PASS_HINT,
    PERFECT_SUFFIX,
)


TODAY = date(2026, 3, 1)


def _run_passes(count, quality=5):
    rep, ease, interval = 0, sm2.DEFAULT_EASE_FACTOR, 1
    results = []
    for _ in range(count):
        result = sm2.calculate_next_review(quality, rep, ease, interval, today=TODAY)
        results.append(result)
        rep, ease, interval = result.repetition_num, result.ease_factor, result.interval_days
    return results


def test_first_perfect_review():
    result = sm2.calculate_next_review(5, 0, 2.5, 1, today=TODAY)

    assert result.repetition_num == 1
    assert result.interval_days == 1
    assert result.ease_factor >= 2.5
    assert result.ease_factor == pytest.approx(2.6)
    assert result.next_review_at == date(2026, 3, 2)
    assert result.recommendation.startswith(GRADUATED_RECOMMENDATIONS[1])
    assert result.recommendation.endswith(PERFECT_SUFFIX)


def test_graduated_intervals_are_exact():
    intervals = [r.interval_days for r in _run_passes(5)]
    assert intervals == [1, 3, 7, 14, 30]


def test_exponential_regime_uses_previous_interval_and_new_ease():
    results = _run_passes(6)
    sixth = results[-1]

    assert sixth.repetition_num == 6
    assert sixth.interval_days == round(30 * sixth.ease_factor)
    assert sixth.interval_days == 93
    assert f"{sixth.interval_days}일 후 복습합니다" in sixth.recommendation


def test_exponential_regime_keeps_growing():
    results = _run_passes(8)
    intervals = [r.interval_days for r in results]
    assert intervals[5] < intervals[6] < intervals[7]


@pytest.mark.parametrize("quality", [0, 1, 2])
@pytest.mark.parametrize("repetition", [0, 1, 4, 9])
def test_fail_resets_regardless_of_progress(quality, repetition):
    result = sm2.calculate_next_review(quality, repetition, 2.8, 45, today=TODAY)

    assert result.repetition_num == 0
    assert result.interval_days == 1
    assert result.recommendation == FAIL_RECOMMENDATION
    assert result.next_review_at == date(2026, 3, 2)


def test_ease_never_drops_below_floor():
    rep, ease, interval = 3, 2.5, 7
    for _ in range(20):
        result = sm2.calculate_next_review(0, rep, ease, interval, today=TODAY)
        assert result.ease_factor >= sm2.MIN_EASE_FACTOR
        rep, ease, interval = result.repetition_num, result.ease_factor, result.interval_days

    assert ease == pytest.approx(1.3)


def test_marginal_pass_adds_hint_and_lowers_ease():
    result = sm2.calculate_next_review(3, 0, 2.5, 1, today=TODAY)

    assert result.repetition_num == 1
    assert result.ease_factor == pytest.approx(2.36)
    assert result.recommendation.endswith(HARD_PASS_HINT)


def test_quality_four_keeps_ease_and_has_no_suffix():
    result = sm2.calculate_next_review(4, 1, 2.5, 1, today=TODAY)

    assert result.ease_factor == pytest.approx(2.5)
    assert result.recommendation == GRADUATED_RECOMMENDATIONS[2]


def test_out_of_domain_inputs_are_clamped():
    result = sm2.calculate_next_review(9, -3, 0.5, -10, today=TODAY)

    assert result.repetition_num == 1
    assert result.interval_days >= 1
    assert result.ease_factor >= sm2.MIN_EASE_FACTOR


@pytest.mark.parametrize(
    "score, quality",
    [
        (0.0, 0),
        (0.1, 1),
        (0.5, 3),
        (0.7, 4),
        (0.9, 5),
        (1.0, 5),
        (-0.3, 0),
        (1.7, 5),
    ],
)
def test_score_to_quality(score, quality):
    assert sm2.score_to_quality(score) == quality


def test_round_half_up():
    assert sm2.round_half_up(2.5) == 3
    assert sm2.round_half_up(3.5) == 4
    assert sm2.round_half_up(0.125, 2) == pytest.approx(0.13)


def test_process_review_updates_state_in_place():
    state = sm2.initialize_review_state("user-1", "palace-1", "moderate", today=TODAY)
    reviewed_at = datetime(2026, 3, 2, 8, 30, tzinfo=timezone.utc)

    updated, result, event = sm2.process_review(state, 5, reviewed_at)

    assert updated is state
    assert state.repetition_num == 1
    assert state.interval_days == 1
    assert state.next_review_at == date(2026, 3, 3)
    assert state.last_reviewed_at == reviewed_at
    assert result.recommendation.startswith(GRADUATED_RECOMMENDATIONS[1])
    assert event["repetition_before"] == 0
    assert event["repetition_after"] == 1
    assert event["ease_before"] == 2.5
    assert event["palace_id"] == "palace-1"


def test_fail_after_progress_scenario():
    state = sm2.ReviewState(
        user_id="user-1",
        palace_id="palace-1",
        difficulty="easy",
        repetition_num=4,
        ease_factor=2.7,
        interval_days=14,
        next_review_at=TODAY,
    )

    sm2.process_review(state, 0, datetime(2026, 3, 1, tzinfo=timezone.utc))

    assert state.repetition_num == 0
    assert state.interval_days == 1


def test_initial_state_is_due_tomorrow():
    state = sm2.initialize_review_state("user-1", "palace-1", today=TODAY)

    assert state.repetition_num == 0
    assert state.ease_factor == 2.5
    assert state.interval_days == 1
    assert state.next_review_at == date(2026, 3, 2)
    assert state.last_reviewed_at is None
    assert not sm2.is_due(state, TODAY)
    assert sm2.is_due(state, date(2026, 3, 2))
