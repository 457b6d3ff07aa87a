"""
SM-2 Constants and Parameters

All configurable parameters for the palace review scheduler in one place.
Recommendation strings are shown to the user as-is (Korean UI).
"""

from enum import IntEnum
from typing import Final, Literal


# ---- Recall Quality ----

class RecallQuality(IntEnum):
    """SM-2 recall quality (0 = complete blank, 5 = perfect recall)."""
    BLACKOUT = 0
    WRONG = 1
    WRONG_FAMILIAR = 2
    HARD_PASS = 3       # Marginal pass
    PASS = 4
    PERFECT = 5


QUALITY_MIN = 0
QUALITY_MAX = 5
PASS_QUALITY = 3  # quality < 3 resets the graduated sequence


# ---- Ease Factor ----

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
EASE_DECIMALS = 2  # Stored ease is rounded to 2 decimals


# ---- Initial State ----

INITIAL_INTERVAL_DAYS = 1
INITIAL_REPETITION = 0


# ---- Graduated Intervals ----
# Fixed intervals for repetitions 1..5, exponential growth afterwards

GRADUATED_INTERVALS: Final[dict[int, int]] = {
    1: 1,
    2: 3,
    3: 7,
    4: 14,
    5: 30,
}

GRADUATED_RECOMMENDATIONS: Final[dict[int, str]] = {
    1: "첫 복습! 궁전을 걸으며 각 지점의 이미지를 선명하게 떠올려 보세요.",
    2: "3일차 복습입니다. 이미지가 흐려지기 전에 궁전을 방문하세요.",
    3: "일주일차! 궁전 속 이야기를 처음부터 끝까지 떠올려 보세요.",
    4: "2주차입니다. 이제 궁전 없이 구절을 떠올려 보세요.",
    5: "한 달차! 장기 기억으로 자리잡고 있습니다. 필사도 해보세요.",
}

# Formatted with the new interval once past graduation
LONG_TERM_RECOMMENDATION = "{interval}일 후 복습합니다. 이 구절은 거의 완벽하게 기억되고 있습니다!"

FAIL_RECOMMENDATION = (
    "회상이 어려웠습니다. 궁전을 처음부터 천천히 다시 걸어보세요. "
    "이미지를 더 생생하게 만들어 봅시다."
)

HARD_PASS_HINT = " (힌트: 이미지를 더 과장되게 만들면 기억에 도움이 됩니다)"
PERFECT_SUFFIX = " 완벽합니다! 🎉"


# ---- Preview Schedules ----

Difficulty = Literal["easy", "moderate", "hard"]

DIFFICULTIES: Final[tuple[str, ...]] = ("easy", "moderate", "hard")
DEFAULT_DIFFICULTY: Final[str] = "moderate"

PREVIEW_INTERVALS: Final[dict[str, list[int]]] = {
    "easy": [1, 3, 7, 14, 30, 60],
    "moderate": [1, 2, 5, 10, 20, 40],
    "hard": [1, 1, 3, 5, 10, 20, 30],  # Early double-touch for the hardest tier
}

PREVIEW_RECOMMENDATIONS: Final[dict[str, list[str]]] = {
    "easy": [
        "궁전을 빠르게 걸어보세요",
        "이미지만 떠올려 보세요",
        "구절을 소리 내어 읽어보세요",
        "필사해 보세요",
        "다른 사람에게 설명해 보세요",
        "자연스럽게 떠오르면 성공! 🎉",
    ],
    "moderate": [
        "궁전을 천천히 걸어보세요",
        "각 지점 이미지를 선명히 하세요",
        "이야기 연결을 다시 확인하세요",
        "힌트 없이 시도하세요",
        "필사와 함께 복습하세요",
        "완벽에 가까워지고 있습니다!",
    ],
    "hard": [
        "궁전을 아주 천천히 걸으세요",
        "이미지를 더 강렬하게 만드세요",
        "3개씩 끊어 복습하세요",
        "이야기를 소리 내어 말하세요",
        "한 절씩 필사하세요",
        "점점 좋아지고 있습니다!",
        "장기 기억으로 전환 중입니다 🎉",
    ],
}

PREVIEW_FALLBACK_RECOMMENDATION = "꾸준히 복습하세요!"


# ---- Difficulty from segment count ----
# Passages with more clauses get denser early reviews

HARD_SEGMENT_THRESHOLD = 10      # > 10 segments -> hard
MODERATE_SEGMENT_THRESHOLD = 5   # > 5 segments -> moderate
