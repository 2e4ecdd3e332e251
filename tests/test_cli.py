# tests/test_cli.py
"""CLI tests: text and JSON output, palette selection, error exits."""

from __future__ import annotations

import json
import logging
from importlib import import_module

import pytest

cli = import_module("pantone_matcher.cli")
settings_mod = import_module("pantone_matcher.matching.settings")
cfg = import_module("pantone_matcher.matching.general.utils.load_config")
LOG = import_module("pantone_matcher.matching.general.utils.log")


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    monkeypatch.delenv("PANTONE_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("PANTONE_DEBUG_TOPICS", raising=False)
    cfg.clear_config_cache()
    settings_mod.get_settings.cache_clear()
    LOG.reload_topics()
    yield
    settings_mod.get_settings.cache_clear()
    LOG.reload_topics()


def test_text_output_exact_hit(capsys):
    assert cli.main(["#6446F0", "--top-k", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Your color: #6446F0  RGB(100, 70, 240)")
    assert out[1] == "Top 3 closest matches (cie76):"
    assert len(out) == 5
    assert "PANTONE 2097 C" in out[2]
    assert "Perfect" in out[2]


def test_json_output(capsys):
    assert cli.main(["rgb(218, 26, 232)", "--json", "--metric", "ciede2000", "--top-k", "2"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["input"] == "#DA1AE8"
    assert doc["rgb"] == {"r": 218, "g": 26, "b": 232}
    assert doc["metric"] == "ciede2000"
    assert len(doc["matches"]) == 2
    first = doc["matches"][0]
    assert first["code"] == "2395-c"
    assert first["rank"] == 1
    assert first["deltaE"] < 1.0


def test_custom_palette_file(tmp_path, capsys):
    p = tmp_path / "mini.json"
    p.write_text(
        json.dumps({"colors": [
            {"name": "Only Black", "code": "black", "hex": "#000000"},
            {"name": "Only White", "code": "white", "hex": "#FFFFFF"},
        ]}),
        encoding="utf-8",
    )
    assert cli.main(["navy", "--palette", str(p), "--json"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert [m["code"] for m in doc["matches"]] == ["black", "white"]


def test_css4_palette(capsys):
    pytest.importorskip("matplotlib")
    assert cli.main(["#000080", "--palette", "css4", "--top-k", "1", "--json"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["matches"][0]["name"] == "navy"


def test_invalid_color_exits_1(capsys):
    assert cli.main(["not-a-color"]) == 1
    captured = capsys.readouterr()
    assert "Error" in captured.err
    assert "not a valid color" in captured.err
    assert captured.out == ""


def test_missing_palette_exits_1(capsys):
    assert cli.main(["#FFFFFF", "--palette", "no-such-palette"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_unknown_metric_rejected_by_argparse():
    with pytest.raises(SystemExit):
        cli.main(["#FFFFFF", "--metric", "cie94"])


def test_debug_flag_logs_to_stderr(capsys):
    assert cli.main(["#FFFFFF", "--top-k", "1", "--debug"]) == 0
    err = capsys.readouterr().err
    assert "[cli][DEBUG]" in err


def test_debug_flag_surfaces_parser_records(caplog):
    caplog.set_level(logging.DEBUG, logger="pantone_matcher")
    assert cli.main(["blurple", "--debug"]) == 1
    messages = [r.getMessage() for r in caplog.records]
    assert any("[NO MATCH]" in m and "blurple" in m for m in messages)


def test_query_is_parsed_once(monkeypatch, capsys):
    calls = []
    real_parse = cli.parse_color_input

    def counting_parse(text, debug=False):
        calls.append(text)
        return real_parse(text, debug=debug)

    monkeypatch.setattr(cli, "parse_color_input", counting_parse)
    assert cli.main(["navy", "--top-k", "1"]) == 0
    assert calls == ["navy"]
    assert capsys.readouterr().out.startswith("Your color: #000080")
