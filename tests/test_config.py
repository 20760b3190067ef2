# tests/test_config.py
import json

import pytest

from learning_dictionary.utils.config_manager import DEFAULTS, Config


def test_missing_file_is_created_with_defaults(tmp_path):
    p = tmp_path / "cfg" / "config.json"
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == DEFAULTS["max_suggestions"]
    assert json.loads(p.read_text())["lookup_cap"] == DEFAULTS["lookup_cap"]


def test_file_values_override_and_unknown_keys_are_ignored(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": "4", "bogus": 1, "autosave": "off"}))
    cfg = Config(str(p))
    assert cfg["max_suggestions"] == 4
    assert cfg["autosave"] is False
    assert "bogus" not in dict(cfg.items())


def test_unreadable_file_falls_back_to_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{oops")
    cfg = Config(str(p))
    assert cfg["max_vocabulary"] == 0


def test_set_coerces_and_persists(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("autosave_interval", "2.5")
    cfg.set("seed_words", "foo, bar baz")
    again = Config(str(p))
    assert again["autosave_interval"] == 2.5
    assert again["seed_words"] == ["foo", "bar", "baz"]


def test_set_rejects_bad_input():
    cfg = Config(path=None)
    with pytest.raises(KeyError):
        cfg.set("nope", 1)
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "many")
    with pytest.raises(ValueError):
        cfg.set("max_vocabulary", -1)
    with pytest.raises(ValueError):
        cfg.set("autosave", "maybe")


def test_in_memory_overrides_do_not_touch_disk(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = Config(path=None, max_suggestions=3)
    assert cfg["max_suggestions"] == 3
    assert list(tmp_path.iterdir()) == []
