"""
Metric computations for review statistics.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from palace.sm2 import round_half_up


def _utc_day(day: date) -> pd.Timestamp:
    return pd.Timestamp(day).tz_localize("UTC")


def calculate_streak(attempts_df: pd.DataFrame, today: date) -> int:
    """
    Consecutive days with at least one attempt.

    The streak must end today or yesterday; otherwise it is broken.
    """
    if attempts_df.empty:
        return 0

    days = (
        attempts_df["day_utc"]
        .drop_duplicates()
        .sort_values(ascending=False)
        .reset_index(drop=True)
    )

    today_utc = _utc_day(today)
    one_day = pd.Timedelta(days=1)
    if days.iloc[0] != today_utc and days.iloc[0] != today_utc - one_day:
        return 0

    streak = 1
    for newer, older in zip(days.iloc[:-1], days.iloc[1:]):
        if newer - older != one_day:
            break
        streak += 1

    return streak


def compute_average_score(attempts_df: pd.DataFrame) -> int:
    """
    Mean attempt score as a 0-100 integer.
    """
    if attempts_df.empty:
        return 0
    return int(round_half_up(float(attempts_df["score"].mean()) * 100))


def compute_memorized_count(attempts_df: pd.DataFrame, threshold: float) -> int:
    """
    Palaces with at least one attempt scoring >= threshold.
    """
    if attempts_df.empty:
        return 0
    passed = attempts_df[attempts_df["score"] >= threshold]
    return int(passed["palace_id"].nunique())


def compute_due_within(schedules_df: pd.DataFrame, last_day: date) -> pd.DataFrame:
    """
    Schedules due on or before last_day, soonest first.
    """
    if schedules_df.empty:
        return schedules_df
    due = schedules_df[schedules_df["next_review_at"] <= pd.Timestamp(last_day)]
    return due.sort_values("next_review_at")
