# tests/test_compose_session.py
from learning_dictionary.core.compose_session import ComposeSession
from learning_dictionary.core.dictionary import LearningDictionary
from learning_dictionary.core.ranking import Prediction


def _session():
    d = LearningDictionary()
    for w in ("selamat", "selamat", "semua", "sekolah"):
        d.learn(w)
    return d, ComposeSession(d, limit=6)


def test_typing_and_backspace():
    _, s = _session()
    assert s.type("sel") == "sel"
    assert s.backspace() == "se"
    s.backspace()
    s.backspace()
    assert s.backspace() == ""


def test_candidates_mark_autocorrect_first():
    _, s = _session()
    s.type("se")
    preds = s.candidates()
    assert preds[0] == Prediction("selamat", True)
    assert {p.text for p in preds[1:]} == {"semua", "sekolah"}
    assert not any(p.is_autocorrect for p in preds[1:])


def test_commit_learns_and_clears():
    d, s = _session()
    s.type("Baru")
    assert s.commit() == "Baru "
    assert s.composing == ""
    assert d.get("baru").frequency == 1
    assert s.commit("\n") == "\n"  # nothing composed, nothing learned
    assert len(d) == 4


def test_selecting_plain_suggestion_commits_it():
    d, s = _session()
    s.type("se")
    pick = [p for p in s.candidates() if p.text == "semua"][0]
    assert s.select(pick) == "semua "
    assert s.composing == ""
    assert d.get("semua").frequency == 2


def test_selecting_autocorrect_replaces_composing_only():
    d, s = _session()
    s.type("se")
    auto = s.candidates()[0]
    assert s.select(auto) == ""
    assert s.composing == "selamat"
    assert d.get("selamat").frequency == 2  # not learned until committed
    s.commit()
    assert d.get("selamat").frequency == 3
