# learning_dictionary/core/dictionary.py
"""
LearningDictionary - application facade over the learning core.

Purpose:
 - Own the WordStore, its PrefixIndex (Trie) and the RankingEngine
 - Serialise every mutation behind one lock, so the interactive input path
   and background learners can call learn() concurrently
 - Load once at startup, save in deferred batches through an Autosaver
 - Simple public API for hosts/tests:
     learn(word), learn_text(text), predict(prefix, limit),
     suggest(composed, limit), get(word), save(), snapshot(), close()

There is no global instance: the host builds one (usually via open())
and hands it to every producer.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from learning_dictionary.context import extract_words
from learning_dictionary.core.ranking import Prediction, RankingEngine
from learning_dictionary.core.seed_loader import seed_if_needed
from learning_dictionary.core.trie import DEFAULT_LOOKUP_CAP, Trie
from learning_dictionary.core.word_store import WordEntry, WordRecord, WordStore
from learning_dictionary.utils.autosaver import Autosaver
from learning_dictionary.utils.config_manager import Config
from learning_dictionary.utils.model_store import (
    FileBackend,
    StorageBackend,
    load_words,
    save_words,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 6


class LearningDictionary:
    """
    Public API:
      - learn(word) -> None
      - learn_text(text) -> int
      - predict(prefix, limit) -> List[str]
      - suggest(composed, limit) -> List[Prediction]
      - get(word) -> Optional[WordEntry]
      - load() / save() / snapshot()
      - close()
    """

    def __init__(
        self,
        backend: Optional[StorageBackend] = None,
        *,
        max_vocabulary: Optional[int] = None,
        lookup_cap: int = DEFAULT_LOOKUP_CAP,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.backend = backend
        self.default_limit = default_limit
        self.ranker = RankingEngine()
        self._store = WordStore(Trie(cap=lookup_cap), max_size=max_vocabulary)
        self._lock = threading.RLock()
        self._autosaver: Optional[Autosaver] = None

    @classmethod
    def open(cls, config: Optional[Config] = None, *, seed: bool = True) -> "LearningDictionary":
        """Build from config: file backend, load, seed, start autosave."""
        cfg = config or Config(path=None)
        d = cls(
            FileBackend(cfg.get("data_path")),
            max_vocabulary=cfg.get("max_vocabulary") or None,
            lookup_cap=cfg.get("lookup_cap"),
            default_limit=cfg.get("max_suggestions"),
        )
        d.load()
        # autosave first so seeded words count as pending writes
        if cfg.get("autosave"):
            d.start_autosave(every=cfg.get("autosave_every"), interval=cfg.get("autosave_interval"))
        if seed:
            seed_if_needed(d, words=cfg.get("seed_words"))
        return d

    # Learning ------------------------------------------------------------
    def learn(self, word) -> None:
        """Upsert one word. Empty/blank input is a silent no-op."""
        with self._lock:
            entry = self._store.learn(word)
        if entry is not None and self._autosaver is not None:
            self._autosaver.notify()

    def learn_text(self, text: str) -> int:
        """Learn every word in `text`. Returns how many were learned."""
        words = extract_words(text) if isinstance(text, str) else []
        for w in words:
            self.learn(w)
        return len(words)

    # Prediction -----------------------------------------------------------
    def predict(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Ranked display forms of learned words starting with `prefix`.
        Never raises; the lock is held only for the bounded lookup.
        """
        if limit is None:
            limit = self.default_limit
        if not isinstance(prefix, str) or not prefix or limit <= 0:
            return []
        with self._lock:
            ids = self._store.index.lookup(prefix)
            entries = self._store.entries(ids)
        return self.ranker.rank(prefix, entries, limit)

    def suggest(self, composed: str, limit: Optional[int] = None) -> List[Prediction]:
        """predict() as candidate-bar records; first may be the autocorrect."""
        return self.ranker.label(composed or "", self.predict(composed, limit))

    # Reads ------------------------------------------------------------------
    def get(self, word) -> Optional[WordEntry]:
        with self._lock:
            return self._store.get(word)

    def top(self, n: int = 10) -> List[WordRecord]:
        """Most learned words, ranked like predictions (inspection only)."""
        recs = self.snapshot()
        recs.sort(key=lambda r: (-r.frequency, -r.recency, r.word))
        return recs[:n]

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, word) -> bool:
        with self._lock:
            return word in self._store

    @property
    def sequence(self) -> int:
        with self._lock:
            return self._store.sequence

    # Persistence ---------------------------------------------------------
    def snapshot(self) -> List[WordRecord]:
        """Copy of the store, taken under the lock."""
        with self._lock:
            return self._store.records()

    def load(self) -> int:
        """
        Replace current state with what the backend holds.
        Missing or corrupt data leaves an empty dictionary.
        """
        records = load_words(self.backend) if self.backend is not None else []
        with self._lock:
            store = WordStore(Trie(cap=self._store.index.cap), max_size=self._store.max_size)
            store.restore(records)
            self._store = store
            return len(store)

    def save(self) -> bool:
        if self.backend is None:
            return False
        if self._autosaver is not None:
            return self._autosaver.flush(force=True)
        return save_words(self.snapshot(), self.backend)

    def start_autosave(self, every: int = 10, interval: float = 5.0) -> Autosaver:
        if self.backend is None:
            raise ValueError("autosave needs a storage backend")
        if self._autosaver is None:
            self._autosaver = Autosaver(
                self.snapshot, self.backend, every=every, interval=interval
            ).start()
        return self._autosaver

    @property
    def autosaver(self) -> Optional[Autosaver]:
        return self._autosaver

    def close(self) -> None:
        """Stop autosave, flushing pending learns."""
        if self._autosaver is not None:
            saver, self._autosaver = self._autosaver, None
            saver.stop()
            logger.info("dictionary closed (%d words)", len(self))

    def __enter__(self) -> "LearningDictionary":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
