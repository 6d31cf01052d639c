"""CLI interface for news-trust.

Usage:
    # Score a text (stdout: JSON analysis)
    echo '충격! 전 세계가 경악했습니다' | python -m news_trust.cli analyze

    # Highlighted rendering in the terminal
    python -m news_trust.cli highlight --text '무조건 믿어야 할 충격적인 진실' --format ansi

    # Everything at once: rendered text plus a one-line verdict
    python -m news_trust.cli --config news_trust.yaml check --format html < article.txt

Exit status 2 on blank input or a bad option value.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import Any, Sequence

from .checker import EmptyTextError, TrustChecker
from .config import OUTPUT_FORMATS, create_checker, load_config, load_from_yaml
from .highlighter import highlight
from .scorer import analyze

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = os.environ.get("NEWS_TRUST_CONFIG", "")


def _load(args: argparse.Namespace) -> dict[str, Any]:
    if args.config:
        return load_from_yaml(args.config)
    return load_config({})


def _read_text(args: argparse.Namespace) -> str:
    return args.text if args.text is not None else sys.stdin.read()


def _dump(data: Any) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def cmd_analyze(args: argparse.Namespace, checker: TrustChecker) -> None:
    """Score text and print the analysis as JSON."""
    text = _read_text(args)
    if not text.strip():
        raise EmptyTextError()
    _dump(analyze(text).to_dict())


def cmd_highlight(args: argparse.Namespace, checker: TrustChecker) -> None:
    """Print the highlighted segments of the text."""
    text = _read_text(args)
    segments = highlight(text, analyze(text).highlights)
    if args.format == "json":
        _dump({"segments": [s.to_dict() for s in segments]})
    else:
        sys.stdout.write(checker.render(segments, args.format))
        sys.stdout.write("\n")


def cmd_check(args: argparse.Namespace, checker: TrustChecker) -> None:
    """Full report: JSON, or rendered text followed by a verdict line."""
    report = checker.check(_read_text(args))
    if args.format == "json":
        _dump(report.to_dict())
        return
    sys.stdout.write(checker.render(report, args.format))
    sys.stdout.write("\n")
    sys.stdout.write(checker.summary(report) + "\n")
    sys.stdout.write(report.result.details + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="news_trust",
        description="Keyword-based trust scoring for news text",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("analyze", "Score text (JSON)"),
        ("highlight", "Highlight suspicious phrases"),
        ("check", "Score and highlight"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--text", default=None, help="Text to check (default: stdin)")
        if name != "analyze":
            p.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )

    cmds = {
        "analyze": cmd_analyze,
        "highlight": cmd_highlight,
        "check": cmd_check,
    }
    try:
        cfg = _load(args)
        if getattr(args, "format", None) is None:
            args.format = cfg["output"]
        cmds[args.command](args, create_checker(cfg))
    except (ValueError, OSError) as e:
        sys.stderr.write(f"news_trust: {e}\n")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
