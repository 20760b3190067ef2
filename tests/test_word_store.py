# tests/test_word_store.py
import pytest

from learning_dictionary.core.trie import Trie
from learning_dictionary.core.word_store import WordRecord, WordStore


def test_learn_creates_then_increments():
    s = WordStore()
    e = s.learn("Hello")
    assert (e.word, e.display, e.frequency, e.recency) == ("hello", "Hello", 1, 1)
    e = s.learn("HELLO")
    assert (e.frequency, e.recency, e.display) == (2, 2, "HELLO")
    assert len(s) == 1
    assert "hello" in s.index


def test_blank_and_non_text_are_ignored():
    s = WordStore()
    for bad in ("", "   ", "\t\n", None, 42):
        assert s.learn(bad) is None
    assert len(s) == 0
    assert s.sequence == 0


def test_sequence_advances_once_per_learn():
    s = WordStore()
    s.learn("a")
    s.learn("b")
    s.learn("a")
    assert s.sequence == 3
    assert s.get("a").recency == 3
    assert s.get("b").recency == 2


def test_get_returns_copy():
    s = WordStore()
    s.learn("cat")
    got = s.get("CAT")
    got.frequency = 99
    assert s.get("cat").frequency == 1
    assert s.get("") is None
    assert s.get("dog") is None


def test_index_and_store_stay_in_step():
    idx = Trie()
    s = WordStore(idx)
    for w in ("one", "One", "two", "three"):
        s.learn(w)
    assert sorted(idx.words()) == sorted(r.word for r in s.records())


def test_eviction_drops_lowest_frequency_then_oldest():
    s = WordStore(max_size=2)
    s.learn("alpha")
    s.learn("alpha")
    s.learn("beta")
    s.learn("gamma")  # beta (1, older) loses to gamma (1, newer)
    assert "beta" not in s
    assert "beta" not in s.index
    assert "alpha" in s and "gamma" in s
    assert len(s.index) == 2


def test_eviction_can_drop_the_newcomer():
    s = WordStore(max_size=1)
    s.learn("keep")
    s.learn("keep")
    s.learn("new")
    assert "keep" in s
    assert "new" not in s


def test_eviction_skips_stale_heap_items():
    s = WordStore(max_size=3)
    for _ in range(200):
        s.learn("hot")
    s.learn("a")
    s.learn("b")
    s.learn("c")
    assert "hot" in s
    assert len(s) == 3


def test_restore_replays_records_and_resumes_sequence():
    s = WordStore()
    s.restore([WordRecord("b", 3, 7, "B"), WordRecord("a", 1, 2)])
    assert s.get("b").display == "B"
    assert s.get("a").display == "a"
    assert s.sequence == 7
    assert s.learn("c").recency == 8
    assert [r.word for r in s.records()] == ["a", "b", "c"]


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        WordStore(max_size=-1)
    assert WordStore(max_size=0).max_size is None


def test_index_priority_follows_learning():
    s = WordStore(Trie(cap=2))
    for i in range(30):
        s.learn(f"b{i:02d}")
    for _ in range(5):
        s.learn("banana")
    assert "banana" in s.index.lookup("b")
