"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

import pandas as pd

from palace import sm2
from palace.analytics.constants import ATTEMPT_COLUMNS, SCHEDULE_COLUMNS


def attempts_to_df(rows: list[dict]) -> pd.DataFrame:
    """
    Build the attempts dataframe (one row per attempt, UTC day column).
    """
    if not rows:
        return pd.DataFrame(columns=ATTEMPT_COLUMNS)

    df = pd.DataFrame(rows)
    df = df[["palace_id", "score", "created_at"]].copy()
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True, errors="coerce")
    df = df.dropna(subset=["palace_id", "created_at"])
    df["day_utc"] = df["created_at"].dt.floor("D")
    df = df.sort_values("created_at").reset_index(drop=True)
    return df


def schedules_to_df(states: list[sm2.ReviewState]) -> pd.DataFrame:
    """
    Build the schedules dataframe from review states.
    """
    if not states:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    df = pd.DataFrame(
        [
            {
                "palace_id": s.palace_id,
                "next_review_at": s.next_review_at,
                "interval_days": s.interval_days,
            }
            for s in states
        ]
    )
    df["next_review_at"] = pd.to_datetime(df["next_review_at"])
    return df


def load_attempts_df(user_id: str) -> pd.DataFrame:
    """
    Load all attempts of a user into a dataframe.
    """
    return attempts_to_df(sm2.get_attempts(user_id))
