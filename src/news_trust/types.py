"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Sequence

Category = Literal["exaggeration", "sourceless", "emotional"]
Level = Literal["trust", "caution", "suspicious"]

# Flattening order for highlight spans
CATEGORIES: tuple[Category, ...] = ("exaggeration", "sourceless", "emotional")


@dataclass(frozen=True, slots=True)
class Match:
    """An accepted keyword occurrence, half-open [start, end)."""
    start: int
    end: int
    category: Category

    def overlaps(self, start: int, end: int) -> bool:
        return start < self.end and end > self.start


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of text, highlighted when category is set."""
    text: str
    category: Category | None = None

    @property
    def highlighted(self) -> bool:
        return self.category is not None

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "category": self.category}


@dataclass(frozen=True, slots=True)
class DetectedKeywords:
    """Scoring-table hits, in table order."""
    sensational: tuple[str, ...] = ()
    exaggeration: tuple[str, ...] = ()
    trust: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "sensational": list(self.sensational),
            "exaggeration": list(self.exaggeration),
            "trust": list(self.trust),
        }


@dataclass(frozen=True, slots=True)
class HighlightSpans:
    """Literal substrings to highlight, one tuple per category."""
    exaggeration: tuple[str, ...] = ()
    sourceless: tuple[str, ...] = ()
    emotional: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Sequence[str]]) -> "HighlightSpans":
        """Build from a {category: [words]} mapping; missing keys are empty.

        Raises ValueError when a value is not a list or tuple of strings.
        """
        fields: dict[str, tuple[str, ...]] = {}
        for cat in CATEGORIES:
            words = data.get(cat) or ()
            if not isinstance(words, (list, tuple)) or not all(isinstance(w, str) for w in words):
                raise ValueError(f"spans.{cat} must be a list of strings")
            fields[cat] = tuple(words)
        return cls(**fields)

    def items(self) -> list[tuple[Category, tuple[str, ...]]]:
        return [(cat, getattr(self, cat)) for cat in CATEGORIES]

    def to_dict(self) -> dict[str, list[str]]:
        return {cat: list(words) for cat, words in self.items()}


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of scoring one text."""
    score: int                      # 0-100, rounded
    level: Level
    detected_keywords: DetectedKeywords
    highlights: HighlightSpans
    risk_count: int                 # sensational + exaggeration hits
    message: str
    details: str
    word_count: int = 0
    length_weight: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level,
            "detectedKeywords": self.detected_keywords.to_dict(),
            "highlights": self.highlights.to_dict(),
            "riskCount": self.risk_count,
            "message": self.message,
            "details": self.details,
            "wordCount": self.word_count,
            "lengthWeight": self.length_weight,
        }


@dataclass(frozen=True, slots=True)
class Report:
    """Analysis plus the highlighted rendering of the same text."""
    text: str
    result: AnalysisResult
    segments: list[Segment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out = self.result.to_dict()
        out["segments"] = [s.to_dict() for s in self.segments]
        return out
