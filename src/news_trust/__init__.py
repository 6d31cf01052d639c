"""news-trust — keyword-based trust scoring and highlighting for news text."""

from .scorer import analyze
from .highlighter import highlight, find_matches
from .checker import TrustChecker, EmptyTextError
from .config import create_checker, load_config, load_from_yaml
from .render import render
from .types import (
    AnalysisResult, DetectedKeywords, HighlightSpans, Match, Report, Segment,
)

__all__ = [
    "analyze", "highlight", "find_matches",
    "TrustChecker", "EmptyTextError",
    "create_checker", "load_config", "load_from_yaml",
    "render",
    "AnalysisResult", "DetectedKeywords", "HighlightSpans", "Match", "Report", "Segment",
]
__version__ = "0.1.0"
