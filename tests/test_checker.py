"""Tests for the caller-side pieces — checker, rendering, config, CLI, sidecar."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import io
import json
import threading
import urllib.error
import urllib.request

import pytest

from news_trust import (
    EmptyTextError, Segment, TrustChecker, analyze, create_checker, load_config, load_from_yaml,
)
from news_trust.cli import main
from news_trust.render import DEFAULT_HTML_CLASSES, render, render_ansi, render_html
from news_trust.server import make_server

SUSPICIOUS = "충격 전 세계 소식"


# ── TrustChecker ─────────────────────────────────────────────────────

@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_blank_text_rejected(text):
    with pytest.raises(EmptyTextError) as exc:
        TrustChecker().check(text)
    assert isinstance(exc.value, ValueError)
    assert str(exc.value) == "뉴스 텍스트를 입력해주세요."


def test_check_combines_analysis_and_segments():
    report = TrustChecker().check(SUSPICIOUS)
    assert report.result == analyze(SUSPICIOUS)
    assert "".join(s.text for s in report.segments) == SUSPICIOUS
    assert Segment("충격", "emotional") in report.segments
    assert Segment("전 세계", "exaggeration") in report.segments


def test_check_keeps_surrounding_whitespace():
    report = TrustChecker().check("  공포 \n")
    assert "".join(s.text for s in report.segments) == "  공포 \n"


def test_summary_line():
    report = TrustChecker().check(SUSPICIOUS)
    line = TrustChecker().summary(report)
    assert line.startswith("45/100 [suspicious]")
    assert "risk 2" in line


def test_report_to_dict_has_segments():
    d = TrustChecker().check(SUSPICIOUS).to_dict()
    assert d["score"] == 45
    assert d["segments"][0] == {"text": "충격", "category": "emotional"}


# ── Rendering ────────────────────────────────────────────────────────

def test_html_escapes_and_marks():
    out = render_html([Segment("<b>"), Segment("a&b", "emotional")])
    assert out.startswith('<div class="whitespace-pre-wrap leading-relaxed">')
    assert "<span>&lt;b&gt;</span>" in out
    assert f'<mark class="{DEFAULT_HTML_CLASSES["emotional"]}">a&amp;b</mark>' in out


def test_html_class_override():
    out = render_html([Segment("x", "sourceless")], {"sourceless": "hl-orange"})
    assert '<mark class="hl-orange">x</mark>' in out


def test_ansi_colour_and_plain():
    segs = [Segment("무조건", "exaggeration"), Segment(" 성공")]
    coloured = render_ansi(segs)
    assert "\x1b[" in coloured and coloured.endswith(" 성공")
    assert render_ansi(segs, color=False) == "[무조건] 성공"


def test_text_render_is_identity():
    segs = [Segment("a"), Segment("b", "emotional"), Segment("c")]
    assert render(segs, "text") == "abc"


def test_unknown_format():
    with pytest.raises(ValueError):
        render([Segment("a")], "pdf")


# ── Config ───────────────────────────────────────────────────────────

def test_config_defaults():
    cfg = load_config({})
    assert cfg["output"] == "json"
    assert cfg["ansi_color"] is True
    assert cfg["html_classes"] == DEFAULT_HTML_CLASSES
    assert cfg["server_host"] == "127.0.0.1"
    assert cfg["server_port"] == 18792


def test_config_nested_block():
    cfg = load_config({"news_trust": {"output": "ansi", "server": {"port": 9000}}})
    assert cfg["output"] == "ansi"
    assert cfg["server_port"] == 9000


def test_config_rejects_bad_values():
    with pytest.raises(ValueError):
        load_config({"output": "xml"})
    with pytest.raises(ValueError):
        load_config({"html_classes": {"sensational": "x"}})


def test_config_from_yaml(tmp_path):
    path = tmp_path / "news_trust.yaml"
    path.write_text(
        "news_trust:\n"
        "  output: html\n"
        "  ansi_color: false\n"
        "  html_classes:\n"
        "    emotional: hl-yellow\n",
        encoding="utf-8",
    )
    cfg = load_from_yaml(path)
    assert cfg["output"] == "html"
    checker = create_checker(cfg)
    assert checker.ansi_color is False
    assert checker.html_classes["emotional"] == "hl-yellow"
    assert checker.html_classes["exaggeration"] == DEFAULT_HTML_CLASSES["exaggeration"]


def test_create_checker_from_raw_dict():
    checker = create_checker({"news_trust": {"ansi_color": False}})
    report = checker.check("공포")
    assert checker.render(report, "ansi") == "[공포]"


# ── CLI ──────────────────────────────────────────────────────────────

def test_cli_analyze(capsys):
    assert main(["--config", "", "analyze", "--text", "오늘 날씨가 좋습니다"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 56
    assert data["level"] == "caution"


def test_cli_blank_input(capsys):
    assert main(["--config", "", "analyze", "--text", "  "]) == 2
    assert "뉴스 텍스트를 입력해주세요." in capsys.readouterr().err


def test_cli_highlight_json(capsys):
    assert main(["--config", "", "highlight", "--text", "공포 확산"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["segments"] == [
        {"text": "공포", "category": "emotional"},
        {"text": " 확산", "category": None},
    ]


def test_cli_uses_config_output(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text("output: ansi\nansi_color: false\n", encoding="utf-8")
    assert main(["--config", str(path), "highlight", "--text", "무조건 성공"]) == 0
    assert capsys.readouterr().out == "[무조건] 성공\n"


def test_cli_check_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SUSPICIOUS))
    assert main(["--config", "", "check", "--format", "text"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == SUSPICIOUS
    assert lines[1].startswith("45/100 [suspicious]")


def test_cli_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "nope.yaml"), "analyze", "--text", "x"]) == 2


# ── HTTP sidecar ─────────────────────────────────────────────────────

@pytest.fixture
def base_url():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    server.server_close()


def _request(url, payload=None):
    data = None if payload is None else json.dumps(payload).encode("utf-8")
    req = urllib.request.Request(url, data=data, headers={"Content-Type": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=5) as resp:
            return resp.status, json.loads(resp.read())
    except urllib.error.HTTPError as e:
        return e.code, json.loads(e.read())


def test_server_health(base_url):
    assert _request(f"{base_url}/health") == (200, {"status": "ok"})


def test_server_analyze(base_url):
    status, data = _request(f"{base_url}/analyze", {"text": SUSPICIOUS})
    assert status == 200
    assert data["score"] == 45
    assert data["detectedKeywords"]["exaggeration"] == ["전 세계"]


def test_server_highlight_with_explicit_spans(base_url):
    status, data = _request(
        f"{base_url}/highlight",
        {"text": "abcd", "spans": {"exaggeration": ["bcd"], "emotional": ["ab"]}},
    )
    assert status == 200
    assert data["segments"] == [
        {"text": "a", "category": None},
        {"text": "bcd", "category": "exaggeration"},
    ]


def test_server_check_rendered(base_url):
    status, data = _request(f"{base_url}/check", {"text": "공포", "format": "html"})
    assert status == 200
    assert data["rendered"].startswith("<div")
    assert data["segments"] == [{"text": "공포", "category": "emotional"}]


def test_server_errors(base_url):
    assert _request(f"{base_url}/check", {"text": " "})[0] == 400
    assert _request(f"{base_url}/check", {"text": "공포", "format": "pdf"})[0] == 400
    assert _request(f"{base_url}/nope", {"text": "x"})[0] == 404
    assert _request(f"{base_url}/nope")[0] == 404


def test_server_highlight_rejects_malformed_spans(base_url):
    for spans in ({"emotional": "bc"}, {"emotional": [1]}, {"sourceless": {"a": 1}}):
        status, data = _request(f"{base_url}/highlight", {"text": "abc", "spans": spans})
        assert status == 400
        assert "must be a list of strings" in data["error"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
