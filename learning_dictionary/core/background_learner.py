# learning_dictionary/core/background_learner.py
"""
BackgroundLearner
-----------------
Independent producer of learn() calls, e.g. words that come back from an
asynchronous translation step. It shares nothing with the typing path
except the dictionary itself, whose learn() is already synchronised.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from learning_dictionary.context import extract_words

logger = logging.getLogger(__name__)


class BackgroundLearner:
    def __init__(self, dictionary, max_workers: int = 1):
        self.dictionary = dictionary
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="dictionary-learner"
        )

    def submit(self, text: str) -> "Future[int]":
        """Learn every word of `text` off-thread; resolves to the word count."""
        return self._pool.submit(self._learn, text)

    def _learn(self, text: str) -> int:
        words = extract_words(text) if isinstance(text, str) else []
        for w in words:
            self.dictionary.learn(w)
        if words:
            logger.debug("background learned %d words", len(words))
        return len(words)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundLearner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
