# tests/test_general_utils.py
"""Tests for general utils (load_config, log) with cache and env overrides."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

LC = import_module("pantone_matcher.matching.general.utils.load_config")
LOG = import_module("pantone_matcher.matching.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via PANTONE_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("PANTONE_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, data dir overrides and config cache between tests."""
    monkeypatch.delenv("PANTONE_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("PANTONE_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_raw_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "swatches.json"
    p.write_text(json.dumps({"colors": ["a"]}), encoding="utf-8")

    out1 = load_config("swatches")
    assert out1 == {"colors": ["a"]}

    p.write_text(json.dumps({"colors": ["changed"]}), encoding="utf-8")
    out2 = load_config("swatches")
    assert out2 is out1 or out2 == {"colors": ["changed"]}  # mtime granularity

    clear_config_cache()
    out3 = load_config("swatches")
    assert out3 == {"colors": ["changed"]}


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}

    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_caches_validated_result_per_validator(tmp_data_dir):
    (tmp_data_dir / "tuple.json").write_text(json.dumps({"a": 1, "b": 2}), encoding="utf-8")
    calls = []

    def to_items(d: dict) -> tuple:
        calls.append(1)
        return tuple(sorted(d.items()))

    out1 = load_config("tuple", mode="validated_dict", validator=to_items)
    out2 = load_config("tuple", mode="validated_dict", validator=to_items)
    assert out1 is out2 == (("a", 1), ("b", 2))
    assert len(calls) == 1

    # a different validator gets its own entry
    raw = load_config("tuple", mode="validated_dict")
    assert raw == {"a": 1, "b": 2}


def test_load_config_validator_failure_becomes_parse_error(tmp_data_dir):
    (tmp_data_dir / "bad.json").write_text(json.dumps({"x": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("bad", mode="validated_dict", validator=validator)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown mode"):
        load_config("x", mode="set")  # type: ignore[call-overload]


def test_temp_data_dir_overrides_and_restores(tmp_path):
    other = tmp_path / "elsewhere"
    other.mkdir()
    (other / "only_here.json").write_text(json.dumps({"ok": True}), encoding="utf-8")

    with LC.temp_data_dir(other):
        assert load_config("only_here") == {"ok": True}

    with pytest.raises(ConfigFileNotFound):
        load_config("only_here")


def test_default_data_dir_discovery_and_failure(tmp_path):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / "a" / "data").mkdir()
    assert LC._default_data_dir(nested) == (tmp_path / "a" / "data").resolve()

    lonely = tmp_path / "x" / "y"
    lonely.mkdir(parents=True)
    if any(p.is_dir() for p in LC._candidate_data_dirs(lonely)):
        pytest.skip("a data/ directory exists above tmp_path on this machine")
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir(lonely)


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("PANTONE_DEBUG_TOPICS", "matching")
    LOG.reload_topics()

    LOG.debug("hello on matching", topic="matching")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on matching" in captured.err
    assert "[matching][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_and_disabled(monkeypatch, capsys):
    LOG.debug("nothing enabled", topic="matching")
    assert capsys.readouterr().err == ""

    monkeypatch.setenv("PANTONE_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    LOG.debug("everything", topic="palette", level="info")
    assert "[palette][INFO] everything" in capsys.readouterr().err


def test_enable_topics_at_runtime(capsys):
    LOG.enable_topics("cli")
    LOG.debug("from the cli", topic="CLI")
    assert "from the cli" in capsys.readouterr().err
