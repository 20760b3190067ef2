# tests/test_trie.py
import pytest

from learning_dictionary.core.trie import Trie


def test_insert_is_idempotent_and_case_insensitive():
    t = Trie()
    assert t.insert("Cat") is True
    assert t.insert("cat") is False
    assert t.insert("CAT") is False
    assert len(t) == 1
    assert "cAt" in t


def test_lookup_returns_words_sharing_prefix():
    t = Trie()
    for w in ("car", "cat", "cart", "dog"):
        t.insert(w)
    assert t.lookup("ca") == {"car", "cat", "cart"}
    assert t.lookup("CA") == {"car", "cat", "cart"}
    assert t.lookup("car") == {"car", "cart"}
    assert t.lookup("d") == {"dog"}


def test_lookup_empty_or_unknown_prefix():
    t = Trie()
    t.insert("hello")
    assert t.lookup("") == set()
    assert t.lookup("x") == set()
    assert t.lookup("hellos") == set()


def test_lookup_respects_soft_cap():
    t = Trie(cap=5)
    for i in range(200):
        t.insert(f"a{i:03d}")
    assert len(t.lookup("a")) == 5
    assert len(t.lookup("a", cap=50)) == 50


def test_capped_lookup_keeps_the_strongest_words():
    t = Trie(cap=3)
    for i in range(60):
        t.insert(f"a{i:02d}", frequency=1, recency=i + 1)
    t.insert("apple", frequency=500, recency=61)
    t.insert("azure", frequency=2, recency=62)
    found = t.lookup("a")
    assert found == {"apple", "azure", "a59"}


def test_score_refresh_and_removal_update_priorities():
    t = Trie(cap=1)
    t.insert("cat", 1, 1)
    t.insert("cart", 1, 2)
    assert t.lookup("ca") == {"cart"}
    t.insert("cat", 2, 3)
    assert t.lookup("ca") == {"cat"}
    t.remove("cat")
    assert t.lookup("ca") == {"cart"}
    t.insert("cart", 1, 2)
    t.insert("car", 1, 1)
    assert t.lookup("c") == {"cart"}


def test_lookup_is_independent_of_insert_order():
    words = [f"w{i}" for i in range(40)]
    a, b = Trie(cap=7), Trie(cap=7)
    for w in words:
        a.insert(w)
    for w in reversed(words):
        b.insert(w)
    assert a.lookup("w") == b.lookup("w")


def test_remove_prunes_and_keeps_siblings():
    t = Trie()
    for w in ("car", "cart", "cat"):
        t.insert(w)
    assert t.remove("cart") is True
    assert "cart" not in t
    assert t.lookup("car") == {"car"}
    assert t.remove("car") is True
    assert t.lookup("ca") == {"cat"}
    assert t.remove("car") is False
    assert t.remove("") is False
    assert len(t) == 1


def test_words_walks_everything():
    t = Trie()
    for w in ("b", "a", "ab"):
        t.insert(w)
    assert sorted(t.words()) == ["a", "ab", "b"]


def test_cap_must_be_positive():
    with pytest.raises(ValueError):
        Trie(cap=0)
