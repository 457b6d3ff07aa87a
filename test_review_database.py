"""
Tests for review schedule and attempt persistence (SQLite).
"""

from datetime import date, datetime, timezone

import pytest

from palace import sm2


USER = "user-1"


def _state(palace_id, next_review_at, user_id=USER):
    state = sm2.initialize_review_state(user_id, palace_id, "easy", today=date(2026, 1, 1))
    state.next_review_at = next_review_at
    return state


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValueError, match="DATABASE_URL"):
        sm2.get_database_url()


def test_test_mode_swaps_database_name(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/review_db")
    monkeypatch.setenv("TEST_MODE", "true")
    assert sm2.get_database_url().endswith("/test_review_db")


def test_create_and_load_review_state(review_db):
    sm2.create_review_state(_state("palace-1", date(2026, 1, 2)))

    loaded = sm2.load_review_state(USER, "palace-1")

    assert loaded.palace_id == "palace-1"
    assert loaded.difficulty == "easy"
    assert loaded.repetition_num == 0
    assert loaded.ease_factor == 2.5
    assert loaded.interval_days == 1
    assert loaded.next_review_at == date(2026, 1, 2)
    assert loaded.last_reviewed_at is None


def test_load_missing_state_returns_none(review_db):
    assert sm2.load_review_state(USER, "nope") is None


def test_save_review_state_updates_existing_row(review_db):
    state = _state("palace-1", date(2026, 1, 2))
    sm2.create_review_state(state)

    sm2.process_review(state, 5, datetime(2026, 1, 2, 9, tzinfo=timezone.utc))
    sm2.save_review_state(state)

    loaded = sm2.load_review_state(USER, "palace-1")
    assert loaded.repetition_num == 1
    assert loaded.ease_factor == pytest.approx(2.6)
    assert loaded.next_review_at == date(2026, 1, 3)
    assert loaded.last_reviewed_at is not None
    assert len(sm2.get_user_schedules(USER)) == 1


def test_save_review_state_inserts_when_missing(review_db):
    sm2.save_review_state(_state("palace-2", date(2026, 1, 5)))
    assert sm2.load_review_state(USER, "palace-2") is not None


def test_due_schedules(review_db):
    sm2.create_review_state(_state("overdue", date(2026, 1, 1)))
    sm2.create_review_state(_state("today", date(2026, 1, 3)))
    sm2.create_review_state(_state("later", date(2026, 1, 10)))
    sm2.create_review_state(_state("other-user", date(2026, 1, 1), user_id="user-2"))

    due = sm2.get_due_schedules(USER, date(2026, 1, 3))
    all_schedules = sm2.get_user_schedules(USER)

    assert [s.palace_id for s in due] == ["overdue", "today"]
    assert [s.palace_id for s in all_schedules] == ["overdue", "today", "later"]


def test_delete_review_state(review_db):
    sm2.create_review_state(_state("palace-1", date(2026, 1, 2)))

    assert sm2.delete_review_state(USER, "palace-1") is True
    assert sm2.delete_review_state(USER, "palace-1") is False
    assert sm2.load_review_state(USER, "palace-1") is None


def test_log_and_get_attempts(review_db):
    for day, score in [(1, 0.4), (2, 0.9)]:
        sm2.log_attempt({
            "user_id": USER,
            "palace_id": "palace-1",
            "user_text": "나는 포도나무요",
            "score": score,
            "quality": sm2.score_to_quality(score),
            "feedback": "좋습니다",
            "created_at": datetime(2026, 1, day, 12, tzinfo=timezone.utc),
        })

    attempts = sm2.get_attempts(USER)

    assert [a["score"] for a in attempts] == [0.9, 0.4]
    assert attempts[0]["quality"] == 5
    assert attempts[0]["id"] != attempts[1]["id"]
    assert len(sm2.get_attempts(USER, limit=1)) == 1
    assert sm2.get_attempts("user-2") == []


def test_shared_session_rolls_back_together(review_db):
    session = sm2.get_session()
    try:
        sm2.log_attempt(
            {
                "user_id": USER,
                "palace_id": "palace-1",
                "user_text": "x",
                "score": 0.1,
                "quality": 1,
                "feedback": "",
            },
            session=session,
        )
        sm2.create_review_state(_state("palace-1", date(2026, 1, 2)), session=session)
        session.rollback()
    finally:
        session.close()

    assert sm2.get_attempts(USER) == []
    assert sm2.load_review_state(USER, "palace-1") is None


def test_count_rows(review_db):
    sm2.create_review_state(_state("palace-1", date(2026, 1, 2)))
    sm2.create_review_state(_state("palace-2", date(2026, 1, 2), user_id="user-2"))
    sm2.log_attempt({
        "user_id": USER,
        "palace_id": "palace-1",
        "user_text": "가",
        "score": 0.1,
        "quality": 1,
        "feedback": "",
    })

    assert sm2.count_rows() == {"review_schedule": 2, "memorization_attempts": 1}
    assert sm2.count_rows("user-2") == {"review_schedule": 1, "memorization_attempts": 0}


def test_reset_script_clears_tables(review_db, monkeypatch, capsys):
    from scripts.maintenance import reset_review_db

    sm2.create_review_state(_state("palace-1", date(2026, 1, 2)))
    monkeypatch.setattr("builtins.input", lambda prompt: "yes")

    reset_review_db.main()

    output = capsys.readouterr().out
    assert "1 review schedules" in output
    assert "0 memorization attempts" in output
    assert sm2.count_rows() == {"review_schedule": 0, "memorization_attempts": 0}


def test_reset_script_cancel_keeps_rows(review_db, monkeypatch):
    from scripts.maintenance import reset_review_db

    sm2.create_review_state(_state("palace-1", date(2026, 1, 2)))
    monkeypatch.setattr("builtins.input", lambda prompt: "no")

    reset_review_db.main()

    assert sm2.count_rows()["review_schedule"] == 1
