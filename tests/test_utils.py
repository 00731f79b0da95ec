# tests/test_utils.py
"""Tests for utils (load_config, log): data-dir resolution, modes, cache, debug topics."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

from senti_lab.utils import log as LOG
from senti_lab.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
    temp_data_dir,
)

# utils/__init__ re-exports the load_config function under the submodule name
LC = import_module("senti_lab.utils.load_config")


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via SENTI_LAB_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("SENTI_LAB_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()
    LOG.reload_topics()


# ---------- data dir resolution ----------
def test_default_data_dir_is_the_bundled_one(monkeypatch):
    monkeypatch.delenv(LC.ENV_VAR, raising=False)
    data_dir = LC.resolve_data_dir()
    assert (data_dir / "lexicon.json").is_file()
    assert (data_dir / "examples.json").is_file()


def test_env_beats_discovery_and_explicit_beats_env(tmp_data_dir, tmp_path):
    assert LC.resolve_data_dir() == tmp_data_dir.resolve()
    other = tmp_path / "other"
    other.mkdir()
    assert LC.resolve_data_dir(other) == other.resolve()


def test_data_dir_not_found(monkeypatch, tmp_path):
    monkeypatch.delenv(LC.ENV_VAR, raising=False)
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "nope"])
    with pytest.raises(LC.DataDirNotFound):
        LC.resolve_data_dir()


def test_generic_data_dir_env_is_ignored(monkeypatch, tmp_path):
    from senti_lab.analysis import analyze_sentiment, get_lexicon

    monkeypatch.delenv(LC.ENV_VAR, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))  # empty, belongs to some other app
    assert (LC.resolve_data_dir() / "lexicon.json").is_file()

    get_lexicon.cache_clear()
    try:
        res = analyze_sentiment("I love this")
    finally:
        get_lexicon.cache_clear()
    assert res.sentiment.value == "positive"


# ---------- load_config ----------
def test_load_config_set_and_cache_hit(tmp_data_dir):
    (tmp_data_dir / "words.json").write_text(json.dumps(["love", "hate", 3]), encoding="utf-8")

    out1 = load_config("words", mode="set")
    assert out1 == frozenset({"love", "hate", "3"})
    assert load_config("words.json", mode="set") is out1  # cached

    clear_config_cache()
    assert load_config("words", mode="set") is not out1


def test_load_config_raw(tmp_data_dir):
    (tmp_data_dir / "raw.json").write_text(json.dumps({"a": [1, 2]}), encoding="utf-8")
    assert load_config("raw") == {"a": [1, 2]}


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    # validator results are never cached
    assert load_config("settings", mode="validated_dict", validator=validator) is not out

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("settings", mode="validated_dict", validator=failing)

    (tmp_data_dir / "oops.json").write_text(json.dumps({"not": "alist"}), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="set")

    (tmp_data_dir / "alist.json").write_text(json.dumps([1]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("alist", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_set_rejects_nested_values(tmp_data_dir):
    (tmp_data_dir / "nested.json").write_text(json.dumps(["ok", ["x"]]), encoding="utf-8")
    with pytest.raises(ConfigTypeError, match="scalars"):
        load_config("nested", mode="set")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown mode"):
        load_config("x", mode="weird")  # type: ignore[arg-type]


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.delenv(LC.ENV_VAR, raising=False)
    (tmp_path / "t.json").write_text(json.dumps({"k": "v"}), encoding="utf-8")
    with temp_data_dir(tmp_path):
        assert load_config("t") == {"k": "v"}
    with pytest.raises(ConfigFileNotFound):
        load_config("t")


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nobody listens", topic="sentiment")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "sentiment")
    LOG.reload_topics()

    LOG.debug("hello on sentiment", topic="sentiment")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on sentiment" in captured.err
    assert "[sentiment][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][INFO] m2" in captured.err


def test_enable_topics_at_runtime(capsys):
    LOG.enable_topics("cli")
    assert LOG.is_enabled("CLI")
    LOG.debug("from cli", topic="cli")
    assert "from cli" in capsys.readouterr().err
