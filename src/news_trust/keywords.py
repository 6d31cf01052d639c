"""Keyword tables — fixed literal phrases, one table per category.

Matching is plain case-sensitive substring containment against the text
exactly as typed.  The tables are in Korean, so there is no meaningful
case folding to do.
"""

from __future__ import annotations
from typing import Iterable

# Clickbait / alarm words (scored)
SENSATIONAL: tuple[str, ...] = (
    "충격",
    "경악",
    "긴급",
    "속보",
    "놀라운",
    "믿을 수 없는",
    "반드시",
    "절대",
    "100%",
    "확실한",
)

# Overstatement (scored and highlighted)
EXAGGERATION: tuple[str, ...] = (
    "전 세계",
    "모든",
    "절대로",
    "무조건",
    "완벽한",
    "최고의",
    "최악의",
    "엄청난",
    "대박",
    "초대형",
    "전면 금지",
)

# Emotional triggers (highlight only)
EMOTIONAL: tuple[str, ...] = ("분노", "공포", "충격", "믿을 수 없는", "경악", "놀라운")

# Vague attribution (highlight only)
SOURCELESS: tuple[str, ...] = (
    "전문가에 따르면",
    "연구 결과에 의하면",
    "보도에 따르면",
    "소식통에 의하면",
    "알려진 바에 따르면",
)

# Sourcing signals (scored, raise trust)
TRUST: tuple[str, ...] = ("연구", "보고서", "통계", "전문가", "교수", "박사", "발표", "조사", "자료", "출처")

# Extra phrases highlighted as exaggeration when present, never scored
SUPPLEMENTAL_EXAGGERATION: tuple[str, ...] = ("무조건", "100%", "전면 금지", "충격적인 진실")


def scan_keywords(text: str, table: Iterable[str]) -> tuple[str, ...]:
    """Return the table entries that occur in text, in table order, deduplicated."""
    return unique(k for k in table if k in text)


def unique(words: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate preserving first-seen order."""
    return tuple(dict.fromkeys(words))
