# tests/test_autosaver.py
import threading
import time

from learning_dictionary.core.dictionary import LearningDictionary
from learning_dictionary.core.word_store import WordRecord
from learning_dictionary.utils.autosaver import Autosaver
from learning_dictionary.utils.model_store import MemoryBackend, load_words


def _wait_for(pred, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if pred():
            return True
        time.sleep(0.01)
    return False


def test_batched_save_after_every_n_learns():
    backend = MemoryBackend()
    d = LearningDictionary(backend)
    d.start_autosave(every=3, interval=60)
    d.learn("a1")
    d.learn("a2")
    time.sleep(0.05)
    assert backend.writes == 0
    d.learn("a3")
    assert _wait_for(lambda: backend.writes == 1)
    assert len(load_words(backend)) == 3
    d.close()


def test_idle_tick_saves_pending_changes():
    backend = MemoryBackend()
    d = LearningDictionary(backend)
    d.start_autosave(every=1000, interval=0.05)
    d.learn("idle")
    assert _wait_for(lambda: backend.writes >= 1)
    assert [r.word for r in load_words(backend)] == ["idle"]
    d.close()


def test_nothing_pending_means_no_write():
    backend = MemoryBackend()
    saver = Autosaver(lambda: [], backend, every=1, interval=0.02).start()
    time.sleep(0.1)
    assert saver.stop() is True
    assert backend.writes == 0


def test_learn_does_not_wait_for_a_slow_write():
    release = threading.Event()

    class SlowBackend(MemoryBackend):
        def write(self, data):
            release.wait(5)
            super().write(data)

    backend = SlowBackend()
    d = LearningDictionary(backend)
    d.start_autosave(every=1, interval=60)
    d.learn("first")  # wakes the worker, which blocks in write()
    t0 = time.perf_counter()
    for i in range(50):
        d.learn(f"w{i}")
    assert d.predict("w", limit=3)
    assert time.perf_counter() - t0 < 1.0
    release.set()
    d.close()
    assert len(load_words(backend)) == 51


def test_failed_write_stays_pending():
    class Failing:
        def read(self):
            return None

        def write(self, data):
            raise OSError("full")

    saver = Autosaver(lambda: [WordRecord("a", 1, 1)], Failing(), every=100, interval=60)
    saver.notify(2)
    assert saver.flush() is False
    assert saver.failures == 1
    assert saver.pending == 2


def test_forced_flush_writes_even_when_clean():
    backend = MemoryBackend()
    saver = Autosaver(lambda: [WordRecord("a", 1, 1)], backend)
    assert saver.flush(force=True) is True
    assert backend.writes == 1
