"""
Attempt Evaluator - Scores a recitation attempt against the source verse.

Workflow:
1. Split the verse into clause segments
2. Fuzzy-match each segment against the attempt (whole string, then a
   sliding window)
3. Blend the per-segment score with whole-text similarity
4. Map the score to SM-2 quality
5. Check keywords and compose feedback

Pure computation, no I/O. Never raises for string input.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence

from palace.recall.constants import (
    EMPTY_ATTEMPT_FEEDBACK,
    FEW_KEYWORDS_ADVICE,
    KEYWORD_SIMILARITY_THRESHOLD,
    MANY_KEYWORDS_ADVICE,
    MATCH_CREDIT,
    MATCH_THRESHOLD,
    MAX_LISTED_KEYWORDS,
    OVERALL_WEIGHT,
    PARTIAL_CREDIT,
    PARTIAL_THRESHOLD,
    SCORE_DECIMALS,
    SCORE_TIER_FEEDBACK,
    SEGMENT_WEIGHT,
    SHOWN_KEYWORDS_WHEN_MANY,
    WINDOW_PADDING,
)
from palace.recall.segmenter import split_verse_into_segments
from palace.recall.text import normalize_text, string_similarity
from palace.sm2.scheduler import round_half_up, score_to_quality


@dataclass(frozen=True)
class EvaluationSettings:
    """Tunable thresholds and weights (defaults are the production values)."""
    match_threshold: float = MATCH_THRESHOLD
    partial_threshold: float = PARTIAL_THRESHOLD
    window_padding: int = WINDOW_PADDING
    match_credit: float = MATCH_CREDIT
    partial_credit: float = PARTIAL_CREDIT
    segment_weight: float = SEGMENT_WEIGHT
    overall_weight: float = OVERALL_WEIGHT
    keyword_threshold: float = KEYWORD_SIMILARITY_THRESHOLD


DEFAULT_SETTINGS = EvaluationSettings()


@dataclass(frozen=True)
class SegmentMatch:
    """Outcome of matching one segment."""
    matched: bool
    partial: bool
    similarity: float


@dataclass(frozen=True)
class EvaluationDetails:
    total_segments: int
    matched_count: int
    partial_matches: int


@dataclass(frozen=True)
class AttemptEvaluation:
    """Result of evaluating one recitation attempt."""
    score: float                  # 0.0 - 1.0
    quality: int                  # SM-2 quality 0-5
    matched_segments: list[bool]  # One flag per verse segment
    missing_keywords: list[str]
    feedback: str
    details: EvaluationDetails = field(
        default_factory=lambda: EvaluationDetails(0, 0, 0)
    )


def match_segment(
    original_segment: str,
    attempt_text: str,
    settings: EvaluationSettings = DEFAULT_SETTINGS
) -> SegmentMatch:
    """
    Find how well a verse segment appears somewhere in the attempt.

    1. Compare against the whole attempt.
    2. Otherwise slide a window slightly longer than the segment across the
       attempt and keep the best similarity, so a correct clause surrounded
       by other text is still found.
    """
    norm_original = normalize_text(original_segment)
    norm_attempt = normalize_text(attempt_text)

    if not norm_original:
        return SegmentMatch(matched=True, partial=False, similarity=1.0)

    full_sim = string_similarity(norm_original, norm_attempt)
    if full_sim >= settings.match_threshold:
        return SegmentMatch(matched=True, partial=False, similarity=full_sim)

    seg_len = len(norm_original)
    window_size = min(seg_len + settings.window_padding, len(norm_attempt))
    last_start = len(norm_attempt) - max(1, seg_len - settings.window_padding)
    best_sim = 0.0

    for start in range(0, last_start + 1):
        window = norm_attempt[start:start + window_size]
        sim = string_similarity(norm_original, window)
        if sim > best_sim:
            best_sim = sim
        if best_sim >= settings.match_threshold:
            break

    return SegmentMatch(
        matched=best_sim >= settings.match_threshold,
        partial=settings.partial_threshold <= best_sim < settings.match_threshold,
        similarity=best_sim,
    )


def check_keywords(
    keywords: Sequence[str],
    attempt_text: str,
    threshold: float = KEYWORD_SIMILARITY_THRESHOLD
) -> list[str]:
    """
    Return the keywords that do not appear in the attempt.

    A keyword counts as present if it is a substring of the normalized
    attempt, or close enough (typo tolerant) to one of its words.
    """
    norm_attempt = normalize_text(attempt_text)
    words = norm_attempt.split(" ")
    missing = []

    for keyword in keywords:
        norm_keyword = normalize_text(keyword)
        if not norm_keyword:
            continue

        if norm_keyword in norm_attempt:
            continue

        if any(string_similarity(norm_keyword, word) >= threshold for word in words):
            continue

        missing.append(keyword)

    return missing


def _quote(keywords: Sequence[str]) -> str:
    return ", ".join(f'"{keyword}"' for keyword in keywords)


def generate_feedback(
    score: float,
    matched_count: int,
    total_segments: int,
    partial_matches: int,
    missing_keywords: Sequence[str]
) -> str:
    """Compose the Korean feedback message shown after an attempt."""
    parts = []

    for min_score, message in SCORE_TIER_FEEDBACK:
        if score >= min_score:
            parts.append(message)
            break

    partial_note = f", {partial_matches}개 부분 일치" if partial_matches > 0 else ""
    parts.append(f"({total_segments}개 구절 중 {matched_count}개 일치{partial_note})")

    if 0 < len(missing_keywords) <= MAX_LISTED_KEYWORDS:
        parts.append(f"놓친 키워드: {_quote(missing_keywords)}")
        parts.append(FEW_KEYWORDS_ADVICE)
    elif len(missing_keywords) > MAX_LISTED_KEYWORDS:
        shown = _quote(missing_keywords[:SHOWN_KEYWORDS_WHEN_MANY])
        remaining = len(missing_keywords) - SHOWN_KEYWORDS_WHEN_MANY
        parts.append(f"놓친 키워드: {shown} 외 {remaining}개")
        parts.append(MANY_KEYWORDS_ADVICE)

    return " ".join(parts)


def evaluate_attempt(
    original_text: str,
    attempt_text: str,
    keywords: Optional[Sequence[str]] = None,
    settings: EvaluationSettings = DEFAULT_SETTINGS
) -> AttemptEvaluation:
    """
    Evaluate a recitation attempt against the original verse.

    Args:
        original_text: Source verse text
        attempt_text: Text typed by the user
        keywords: Optional key words to check for
        settings: Thresholds and weights

    Returns:
        AttemptEvaluation with score, quality, per-segment flags,
        missing keywords and feedback
    """
    segments = split_verse_into_segments(original_text)
    total_segments = len(segments)

    if not normalize_text(attempt_text):
        return AttemptEvaluation(
            score=0.0,
            quality=0,
            matched_segments=[False] * total_segments,
            missing_keywords=list(keywords or []),
            feedback=EMPTY_ATTEMPT_FEEDBACK,
            details=EvaluationDetails(total_segments, 0, 0),
        )

    matches = [match_segment(seg, attempt_text, settings) for seg in segments]
    matched_count = sum(1 for m in matches if m.matched)
    partial_matches = sum(1 for m in matches if m.partial)

    if total_segments > 0:
        credit = sum(
            settings.match_credit if m.matched
            else settings.partial_credit if m.partial
            else 0.0
            for m in matches
        )
        raw_score = credit / total_segments
    else:
        raw_score = 0.0

    overall_sim = string_similarity(
        normalize_text(original_text),
        normalize_text(attempt_text)
    )
    blended = raw_score * settings.segment_weight + overall_sim * settings.overall_weight
    score = round_half_up(min(1.0, max(0.0, blended)), SCORE_DECIMALS)

    quality = score_to_quality(score)

    missing_keywords = (
        check_keywords(keywords, attempt_text, settings.keyword_threshold)
        if keywords
        else []
    )

    feedback = generate_feedback(
        score,
        matched_count,
        total_segments,
        partial_matches,
        missing_keywords,
    )

    return AttemptEvaluation(
        score=score,
        quality=quality,
        matched_segments=[m.matched for m in matches],
        missing_keywords=missing_keywords,
        feedback=feedback,
        details=EvaluationDetails(total_segments, matched_count, partial_matches),
    )
