# learning_dictionary/core/ranking.py
"""
RankingEngine - turns raw prefix candidates into a bounded prediction list.

Ordering, most significant first:
 - frequency, descending
 - recency, descending (most recently learned wins a frequency tie)
 - word, ascending (deterministic final tie-break)

A candidate equal to the typed prefix (case-insensitive) is never returned:
repeating what the user already typed predicts nothing.

label() is the caller-facing autocorrect policy layered over rank(): the
first prediction becomes the autocorrect candidate when it differs from the
composed text. It does not re-rank.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from learning_dictionary.core.word_store import WordEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prediction:
    """One candidate-bar slot."""

    text: str
    is_autocorrect: bool = False


def sort_key(entry: WordEntry) -> Tuple[int, int, str]:
    return (-entry.frequency, -entry.recency, entry.word)


class RankingEngine:
    """Stateless; safe to share between threads."""

    def rank(self, prefix: str, entries: Iterable[WordEntry], limit: int) -> List[str]:
        """
        Order `entries` for `prefix` and return at most `limit` display forms.
        Empty prefix or non-positive limit yields [].
        """
        if not prefix or limit <= 0:
            return []

        typed = prefix.lower()
        pool = [e for e in entries if e.word != typed]
        pool.sort(key=sort_key)
        return [e.display for e in pool[:limit]]

    @staticmethod
    def label(composed: str, words: Sequence[str]) -> List[Prediction]:
        out: List[Prediction] = []
        for i, w in enumerate(words):
            auto = i == 0 and w.lower() != composed.lower()
            out.append(Prediction(w, auto))
        return out
