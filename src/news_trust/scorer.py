"""Scorer — keyword-count trust score with a length weight.

Usage:
    from news_trust import analyze

    result = analyze("충격! 전 세계가 경악했습니다")
    print(result.score, result.level)   # 38 suspicious
    print(result.highlights)            # spans to feed into highlight()
"""

from __future__ import annotations
import logging
import math

from .keywords import (
    EMOTIONAL,
    EXAGGERATION,
    SENSATIONAL,
    SOURCELESS,
    SUPPLEMENTAL_EXAGGERATION,
    TRUST,
    scan_keywords,
    unique,
)
from .types import AnalysisResult, DetectedKeywords, HighlightSpans, Level

logger = logging.getLogger(__name__)

BASE_SCORE = 70
SENSATIONAL_PENALTY = 8
EXAGGERATION_PENALTY = 6
TRUST_BONUS = 10

# (minimum score, level, message, details), checked top to bottom
VERDICTS: list[tuple[float, Level, str, str]] = [
    (80, "trust",
     "신뢰할 수 있는 뉴스입니다",
     "출처가 명확하고 과장 표현이 적습니다."),
    (50, "caution",
     "주의가 필요합니다",
     "일부 자극적인 표현이 포함되어 있습니다. 다른 출처와 교차 확인을 권장합니다."),
    (float("-inf"), "suspicious",
     "가짜 뉴스가 의심됩니다",
     "자극적이고 과장된 표현이 많이 포함되어 있습니다. 신뢰하기 어렵습니다."),
]


def length_weight(word_count: int) -> float:
    """Longer texts amplify the base score; short ones dampen it."""
    if word_count > 50:
        return 1.2
    if word_count > 20:
        return 1.0
    return 0.8


def verdict(score: float) -> tuple[Level, str, str]:
    """Map an unrounded, clamped score to (level, message, details)."""
    for threshold, level, message, details in VERDICTS:
        if score >= threshold:
            return level, message, details
    raise AssertionError("unreachable")  # last threshold is -inf


def analyze(text: str) -> AnalysisResult:
    """Score text for trustworthiness.

    Total over any string.  Rejecting blank input is the caller's job
    (see TrustChecker.check).
    """
    # Computed but never used for matching: tables are matched
    # case-sensitively against the text as typed.
    lowered = text.lower()  # noqa: F841

    sensational = scan_keywords(text, SENSATIONAL)
    exaggeration = scan_keywords(text, EXAGGERATION)
    trust = scan_keywords(text, TRUST)

    emotional = scan_keywords(text, EMOTIONAL)
    sourceless = scan_keywords(text, SOURCELESS)
    exaggeration_hl = unique(
        w for w in (*exaggeration, *SUPPLEMENTAL_EXAGGERATION) if w in text
    )

    risk_count = len(sensational) + len(exaggeration)

    word_count = len(text.split())
    weight = length_weight(word_count)

    base = (
        BASE_SCORE
        - len(sensational) * SENSATIONAL_PENALTY
        - len(exaggeration) * EXAGGERATION_PENALTY
        + len(trust) * TRUST_BONUS
    )
    final = max(0.0, min(100.0, base * weight))
    level, message, details = verdict(final)

    logger.debug(
        "analyze: words=%d weight=%.1f sensational=%d exaggeration=%d trust=%d score=%.2f",
        word_count, weight, len(sensational), len(exaggeration), len(trust), final,
    )

    return AnalysisResult(
        score=_round_half_up(final),
        level=level,
        detected_keywords=DetectedKeywords(
            sensational=sensational,
            exaggeration=exaggeration,
            trust=trust,
        ),
        highlights=HighlightSpans(
            exaggeration=exaggeration_hl,
            sourceless=sourceless,
            emotional=emotional,
        ),
        risk_count=risk_count,
        message=message,
        details=details,
        word_count=word_count,
        length_weight=weight,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
