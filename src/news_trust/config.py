"""YAML/dict config loader for news-trust.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).  Keyword tables are fixed and cannot be
configured; only presentation and the sidecar address can.

Example YAML:

    news_trust:
      output: html            # json | html | ansi | text
      ansi_color: true
      html_classes:
        exaggeration: hl-red
        sourceless: hl-orange
        emotional: hl-yellow
      server:
        host: 127.0.0.1
        port: 18792
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .checker import TrustChecker
from .render import DEFAULT_HTML_CLASSES, FORMATS
from .types import CATEGORIES

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 18792
OUTPUT_FORMATS = ("json", *FORMATS)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "news_trust" key or flat
    if "news_trust" in data:
        data = data["news_trust"] or {}

    output = data.get("output", "json")
    if output not in OUTPUT_FORMATS:
        raise ValueError(f"output must be one of {', '.join(OUTPUT_FORMATS)}, got {output!r}")

    classes = dict(DEFAULT_HTML_CLASSES)
    for cat, cls in (data.get("html_classes") or {}).items():
        if cat not in CATEGORIES:
            raise ValueError(f"unknown highlight category {cat!r} in html_classes")
        classes[cat] = str(cls)

    server = data.get("server") or {}
    return {
        "output": output,
        "ansi_color": bool(data.get("ansi_color", True)),
        "html_classes": classes,
        "server_host": server.get("host", DEFAULT_HOST),
        "server_port": int(server.get("port", DEFAULT_PORT)),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def create_checker(config: dict[str, Any] | None = None) -> TrustChecker:
    """Create a TrustChecker from a config dict (raw or already normalized)."""
    cfg = config if config and "server_port" in config else load_config(config)
    return TrustChecker(html_classes=cfg["html_classes"], ansi_color=cfg["ansi_color"])
