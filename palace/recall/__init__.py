"""
Recall - Scoring of recitation attempts.

Quick start:
    from palace import recall

    evaluation = recall.evaluate_attempt(verse_text, user_text, keywords)
    evaluation.score, evaluation.quality, evaluation.feedback
"""

from palace.recall.text import (
    normalize_text,
    levenshtein_distance,
    string_similarity,
)
from palace.recall.segmenter import split_verse_into_segments
from palace.recall.evaluator import (
    AttemptEvaluation,
    EvaluationDetails,
    EvaluationSettings,
    SegmentMatch,
    check_keywords,
    evaluate_attempt,
    generate_feedback,
    match_segment,
)
from palace.recall.hints import HintLocus, HintResult, get_hint
from palace.recall.keywords import (
    KEYWORD_IMAGE_MAP,
    KeywordImage,
    find_known_keywords,
    suggest_keywords,
)

__all__ = [
    "normalize_text",
    "levenshtein_distance",
    "string_similarity",
    "split_verse_into_segments",
    "AttemptEvaluation",
    "EvaluationDetails",
    "EvaluationSettings",
    "SegmentMatch",
    "check_keywords",
    "evaluate_attempt",
    "generate_feedback",
    "match_segment",
    "HintLocus",
    "HintResult",
    "get_hint",
    "KEYWORD_IMAGE_MAP",
    "KeywordImage",
    "find_known_keywords",
    "suggest_keywords",
]
