"""Render segment lists for display.

    html  — <mark> per highlighted span, classes keyed by category
    ansi  — terminal colours (or [brackets] when colour is off)
    text  — the original text back
"""

from __future__ import annotations
import html
from typing import Iterable, Mapping

from .types import Segment

FORMATS = ("html", "ansi", "text")

DEFAULT_HTML_CLASSES: dict[str, str] = {
    "exaggeration": "bg-red-200 dark:bg-red-900/40 text-red-900 dark:text-red-200 px-1 rounded",
    "sourceless": "bg-orange-200 dark:bg-orange-900/40 text-orange-900 dark:text-orange-200 px-1 rounded",
    "emotional": "bg-yellow-200 dark:bg-yellow-900/40 text-yellow-900 dark:text-yellow-200 px-1 rounded",
}

WRAPPER_CLASS = "whitespace-pre-wrap leading-relaxed"

# SGR sequences: red, orange (256-colour), yellow
_ANSI_COLORS: dict[str, str] = {
    "exaggeration": "\x1b[41;97m",
    "sourceless": "\x1b[48;5;208;30m",
    "emotional": "\x1b[43;30m",
}
_ANSI_RESET = "\x1b[0m"


def render_html(
    segments: Iterable[Segment],
    classes: Mapping[str, str] | None = None,
) -> str:
    classes = {**DEFAULT_HTML_CLASSES, **(classes or {})}
    parts: list[str] = []
    for seg in segments:
        body = html.escape(seg.text)
        if seg.category is None:
            parts.append(f"<span>{body}</span>")
        else:
            cls = html.escape(classes.get(seg.category, ""), quote=True)
            parts.append(f'<mark class="{cls}">{body}</mark>')
    return f'<div class="{WRAPPER_CLASS}">{"".join(parts)}</div>'


def render_ansi(segments: Iterable[Segment], *, color: bool = True) -> str:
    parts: list[str] = []
    for seg in segments:
        if seg.category is None:
            parts.append(seg.text)
        elif color:
            parts.append(f"{_ANSI_COLORS[seg.category]}{seg.text}{_ANSI_RESET}")
        else:
            parts.append(f"[{seg.text}]")
    return "".join(parts)


def render_text(segments: Iterable[Segment]) -> str:
    return "".join(seg.text for seg in segments)


def render(
    segments: Iterable[Segment],
    fmt: str,
    *,
    classes: Mapping[str, str] | None = None,
    color: bool = True,
) -> str:
    """Render segments in one of FORMATS."""
    if fmt == "html":
        return render_html(segments, classes)
    if fmt == "ansi":
        return render_ansi(segments, color=color)
    if fmt == "text":
        return render_text(segments)
    raise ValueError(f"unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")
