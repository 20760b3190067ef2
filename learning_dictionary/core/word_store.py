# learning_dictionary/core/word_store.py
"""
WordStore
---------
Canonical table of learned words keyed by their lowercase form.
Each entry keeps:
 - frequency: how often the word was learned (never decreases)
 - recency: global sequence number stamped at the last learn
 - display: last seen casing, shown to the user

The store registers new keys with the PrefixIndex (Trie) so the two stay
in one-to-one correspondence. An optional capacity bound evicts the entry
with the lowest (frequency, recency) pair.

Not thread safe on its own; LearningDictionary holds the lock.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from learning_dictionary.core.trie import Trie

logger = logging.getLogger(__name__)


@dataclass
class WordEntry:
    word: str
    display: str
    frequency: int = 1
    recency: int = 0

    def copy(self) -> "WordEntry":
        return replace(self)


class WordRecord(NamedTuple):
    """Persisted form of a WordEntry."""

    word: str
    frequency: int
    recency: int
    display: Optional[str] = None


def normalize_word(word) -> Optional[Tuple[str, str]]:
    """Return (key, display) for a learnable word, None for blank/non-text input."""
    if not isinstance(word, str):
        return None
    display = word.strip()
    if not display:
        return None
    return display.lower(), display


class WordStore:
    """
    Public API:
      learn(word) -> WordEntry | None
      get(word) -> WordEntry | None   (copy)
      entries(keys) -> list[WordEntry] (copies, unknown keys skipped)
      records() -> list[WordRecord]   (ascending recency)
      restore(records)
    """

    def __init__(self, index: Optional[Trie] = None, max_size: Optional[int] = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must be non-negative (0 means unbounded)")
        self.index = index if index is not None else Trie()
        self.max_size = max_size or None
        self._entries: Dict[str, WordEntry] = {}
        self._seq = 0
        # (frequency, recency, word); stale items are skipped on pop
        self._heap: List[Tuple[int, int, str]] = []

    # Mutation ----------------------------------------------------------------
    def learn(self, word) -> Optional[WordEntry]:
        """
        Upsert `word`. Blank input is ignored and returns None.
        Advances the sequence counter exactly once per learned word.
        """
        norm = normalize_word(word)
        if norm is None:
            return None
        key, display = norm

        self._seq += 1
        entry = self._entries.get(key)
        if entry is None:
            entry = WordEntry(word=key, display=display, frequency=1, recency=self._seq)
            self._entries[key] = entry
        else:
            entry.frequency += 1
            entry.recency = self._seq
            entry.display = display
        self.index.insert(key, entry.frequency, entry.recency)

        self._track(entry)
        self._enforce_capacity()
        return entry

    def restore(self, records: Iterable[WordRecord]) -> int:
        """
        Replay persisted records into an empty store, oldest first.
        Frequency and recency are reinstated as stored; the sequence
        counter resumes after the highest recency seen.
        """
        if self._entries:
            raise RuntimeError("restore() needs an empty store")

        count = 0
        for rec in sorted(records, key=lambda r: r.recency):
            key = rec.word.lower()
            entry = WordEntry(
                word=key,
                display=rec.display or key,
                frequency=int(rec.frequency),
                recency=int(rec.recency),
            )
            if key not in self._entries:
                count += 1
            self._entries[key] = entry
            self.index.insert(key, entry.frequency, entry.recency)
            self._seq = max(self._seq, entry.recency)
            self._track(entry)
        self._enforce_capacity()
        return count

    # Reads ----------------------------------------------------------------------
    def get(self, word) -> Optional[WordEntry]:
        norm = normalize_word(word)
        if norm is None:
            return None
        entry = self._entries.get(norm[0])
        return entry.copy() if entry else None

    def entries(self, keys: Iterable[str]) -> List[WordEntry]:
        out = []
        for k in keys:
            entry = self._entries.get(k)
            if entry is not None:
                out.append(entry.copy())
        return out

    def records(self) -> List[WordRecord]:
        ordered = sorted(self._entries.values(), key=lambda e: e.recency)
        return [WordRecord(e.word, e.frequency, e.recency, e.display) for e in ordered]

    @property
    def sequence(self) -> int:
        return self._seq

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word) -> bool:
        norm = normalize_word(word)
        return norm is not None and norm[0] in self._entries

    # Capacity ---------------------------------------------------------------
    def _track(self, entry: WordEntry) -> None:
        if self.max_size is None:
            return
        heapq.heappush(self._heap, (entry.frequency, entry.recency, entry.word))
        # every learn leaves one stale item behind; rebuild before it piles up
        if len(self._heap) > 4 * len(self._entries) + 64:
            self._heap = [(e.frequency, e.recency, e.word) for e in self._entries.values()]
            heapq.heapify(self._heap)

    def _enforce_capacity(self) -> None:
        if self.max_size is None:
            return
        while len(self._entries) > self.max_size and self._heap:
            freq, rec, key = heapq.heappop(self._heap)
            entry = self._entries.get(key)
            if entry is None or entry.frequency != freq or entry.recency != rec:
                continue  # stale
            del self._entries[key]
            self.index.remove(key)
            logger.debug("evicted %r (frequency=%d, recency=%d)", key, freq, rec)
