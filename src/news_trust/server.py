"""HTTP sidecar server for news-trust.

A lightweight stdlib HTTP server on localhost, so a UI shell can call the
scorer without spawning a process per request.

Endpoints:
    GET  /health      — Health check
    POST /analyze     — {"text": ...} → analysis
    POST /highlight   — {"text": ..., "spans"?: {...}} → {"segments": [...]}
    POST /check       — {"text": ..., "format"?: "html"|"ansi"|"text"} → report

All endpoints expect/return JSON.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

from .checker import EmptyTextError, TrustChecker
from .config import DEFAULT_HOST, DEFAULT_PORT, create_checker, load_from_yaml
from .highlighter import highlight
from .scorer import analyze
from .types import HighlightSpans

logger = logging.getLogger(__name__)

ENV_PORT = int(os.environ.get("NEWS_TRUST_PORT", str(DEFAULT_PORT)))


class BadRequest(ValueError):
    """Client sent an unusable body."""


class TrustHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the news-trust sidecar."""

    checker: TrustChecker = TrustChecker()

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        try:
            data = json.loads(body) if body else {}
        except json.JSONDecodeError as e:
            raise BadRequest(f"invalid JSON: {e.msg}") from e
        if not isinstance(data, dict):
            raise BadRequest("body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok"})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            if self.path not in ("/analyze", "/highlight", "/check"):
                self._respond(404, {"error": "not found"})
                return

            body = self._read_json()
            text = body.get("text", "")
            if not isinstance(text, str):
                raise BadRequest("text must be a string")

            if self.path == "/analyze":
                if not text.strip():
                    raise EmptyTextError()
                self._respond(200, analyze(text).to_dict())

            elif self.path == "/highlight":
                spans = body.get("spans")
                if spans is None:
                    spans = analyze(text).highlights
                elif isinstance(spans, dict):
                    spans = HighlightSpans.from_mapping(spans)
                else:
                    raise BadRequest("spans must be an object")
                segments = highlight(text, spans)
                self._respond(200, {"segments": [s.to_dict() for s in segments]})

            else:
                report = self.checker.check(text)
                out = report.to_dict()
                fmt = body.get("format")
                if fmt:
                    out["rendered"] = self.checker.render(report, fmt)
                self._respond(200, out)

        except ValueError as e:
            # EmptyTextError, BadRequest, bad spans, unknown render format
            self._respond(400, {"error": str(e)})
        except Exception as e:
            logger.exception("request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def make_server(
    host: str = DEFAULT_HOST,
    port: int = ENV_PORT,
    checker: TrustChecker | None = None,
) -> HTTPServer:
    """Bind a server; port 0 picks a free one."""
    handler = type("BoundTrustHandler", (TrustHandler,), {"checker": checker or TrustChecker()})
    return HTTPServer((host, port), handler)


def serve(
    host: str = DEFAULT_HOST,
    port: int = ENV_PORT,
    checker: TrustChecker | None = None,
) -> None:
    """Start the news-trust HTTP sidecar."""
    server = make_server(host, port, checker)
    logger.info("news-trust sidecar listening on http://%s:%d", host, server.server_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="news-trust HTTP sidecar")
    parser.add_argument("--config", default=os.environ.get("NEWS_TRUST_CONFIG", ""))
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    cfg = load_from_yaml(args.config) if args.config else None
    serve(
        host=args.host or (cfg["server_host"] if cfg else DEFAULT_HOST),
        port=args.port or (cfg["server_port"] if cfg else ENV_PORT),
        checker=create_checker(cfg),
    )
