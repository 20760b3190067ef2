# tests/test_seed_loader.py
from learning_dictionary.core.dictionary import LearningDictionary
from learning_dictionary.core.seed_loader import DEFAULT_SEED_WORDS, needs_seed, seed_if_needed
from learning_dictionary.utils.config_manager import Config


def test_empty_dictionary_gets_seeded():
    d = LearningDictionary()
    assert needs_seed(d)
    assert seed_if_needed(d) == len(DEFAULT_SEED_WORDS)
    assert not needs_seed(d)
    assert d.predict("a", limit=2) == ["Apa", "AnKeyboard"]
    assert d.predict("ha") == ["Halo"]


def test_populated_dictionary_is_left_alone():
    d = LearningDictionary()
    d.learn("apple")
    d.learn("avocado")
    assert seed_if_needed(d) == 0
    assert len(d) == 2


def test_one_match_is_still_too_small():
    d = LearningDictionary()
    d.learn("apple")
    assert seed_if_needed(d, words=["alpha", "", "  ", "beta"]) == 2
    assert len(d) == 3


def test_open_seeds_once_and_persists(tmp_path):
    cfg = Config(path=None, data_path=str(tmp_path / "d.json"), autosave_interval=60)
    d = LearningDictionary.open(cfg)
    assert len(d) == len(DEFAULT_SEED_WORDS)
    d.close()

    again = LearningDictionary.open(cfg)
    assert len(again) == len(DEFAULT_SEED_WORDS)
    assert again.get("halo").frequency == 1
    again.close()


def test_open_without_seed(tmp_path):
    cfg = Config(path=None, data_path=str(tmp_path / "d.json"), autosave=False)
    d = LearningDictionary.open(cfg, seed=False)
    assert len(d) == 0
