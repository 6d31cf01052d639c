"""TrustChecker — the caller-side glue around analyze() and highlight().

Usage:

    checker = TrustChecker()

    report = checker.check(article_text)
    print(report.result.score, report.result.message)
    print(checker.render(report, "ansi"))

Blank input is rejected here, not in the core functions.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Sequence

from .highlighter import highlight
from .render import DEFAULT_HTML_CLASSES, render
from .scorer import analyze
from .types import Report, Segment

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "뉴스 텍스트를 입력해주세요."


class EmptyTextError(ValueError):
    """Raised when the text to check is empty or whitespace only."""

    def __init__(self, message: str = EMPTY_TEXT_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class TrustChecker:
    """Validates input, scores it and builds the highlighted rendering."""

    html_classes: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HTML_CLASSES))
    ansi_color: bool = True

    def check(self, text: str) -> Report:
        """Analyze and highlight text. Raises EmptyTextError on blank input."""
        if not text.strip():
            raise EmptyTextError()
        result = analyze(text)
        segments = highlight(text, result.highlights)
        logger.info(
            "checked %d chars: score=%d level=%s risk=%d",
            len(text), result.score, result.level, result.risk_count,
        )
        return Report(text=text, result=result, segments=segments)

    def render(self, report: Report | Sequence[Segment], fmt: str) -> str:
        """Render a report's (or a bare segment list's) highlighted text."""
        segments = report.segments if isinstance(report, Report) else report
        return render(segments, fmt, classes=self.html_classes, color=self.ansi_color)

    def summary(self, report: Report) -> str:
        """One line: score, level and message."""
        r = report.result
        return f"{r.score}/100 [{r.level}] {r.message} (risk {r.risk_count}, trust {len(r.detected_keywords.trust)})"
