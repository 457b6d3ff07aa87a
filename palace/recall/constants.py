"""
Recall Evaluation Constants

Thresholds, weights and feedback messages for scoring recitation attempts.
The numeric values are empirical defaults; EvaluationSettings lets callers
override them.
"""

from __future__ import annotations

from typing import Final


# ---- Normalization ----

# ASCII and CJK punctuation plus quote variants removed before comparing
PUNCTUATION_CHARS: Final[str] = ".,;:!?'\"()[]{}—–-…·「」『』“”‘’"


# ---- Segmentation ----

# Clause markers (consumed when surrounded by whitespace)
CLAUSE_MARKERS: Final[tuple[str, ...]] = (
    "그러나", "그러므로", "또한", "그리고", "이는", "곧",
    "너희", "나는", "내가", "주", "그", "이",
)


# ---- Segment Matching ----

MATCH_THRESHOLD = 0.65     # Segment counted as recalled
PARTIAL_THRESHOLD = 0.40   # Segment recognizable but incomplete
WINDOW_PADDING = 10        # Extra characters around a segment in the sliding window


# ---- Scoring ----

MATCH_CREDIT = 1.0
PARTIAL_CREDIT = 0.4
SEGMENT_WEIGHT = 0.7       # Share of the per-segment score in the final score
OVERALL_WEIGHT = 0.3       # Share of whole-text similarity in the final score
SCORE_DECIMALS = 2


# ---- Keywords ----

KEYWORD_SIMILARITY_THRESHOLD = 0.7
MAX_LISTED_KEYWORDS = 5    # Above this, only the first few are shown
SHOWN_KEYWORDS_WHEN_MANY = 3


# ---- Feedback ----

EMPTY_ATTEMPT_FEEDBACK = "텍스트가 입력되지 않았습니다. 궁전의 첫 번째 장소부터 떠올려 보세요."

# (minimum score, message), checked top to bottom
SCORE_TIER_FEEDBACK: Final[list[tuple[float, str]]] = [
    (0.95, "완벽에 가까운 암송입니다! 놀랍습니다."),
    (0.8, "아주 잘 기억하고 있습니다! 거의 완벽합니다."),
    (0.6, "좋은 시도입니다! 대부분 기억하고 있지만 몇 부분을 더 연습하면 좋겠습니다."),
    (0.4, "절반 정도 기억하고 있습니다. 궁전을 다시 천천히 걸어보세요."),
    (0.2, "아직 많은 부분이 빠져 있습니다. 궁전 이미지를 더 생생하게 떠올려 봅시다."),
    (0.0, "처음부터 다시 궁전을 걸어보는 것을 추천합니다. 각 이미지를 선명하게 만들어 보세요."),
]

FEW_KEYWORDS_ADVICE = "이 키워드들의 이미지를 더 강렬하게 만들어 보세요."
MANY_KEYWORDS_ADVICE = "궁전을 처음부터 천천히 다시 걸으며 각 이미지를 확인해 보세요."
