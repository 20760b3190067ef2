"""
learning_dictionary.core

The learning dictionary itself.
Contains:
 - the prefix index (Trie)
 - the word table with frequency/recency bookkeeping (WordStore)
 - prediction ordering and autocorrect labelling (RankingEngine)
 - the thread-safe facade tying them to persistence (LearningDictionary)
 - first-run seeding, background learning and the compose session
"""

from .trie import Trie
from .word_store import WordEntry, WordRecord, WordStore
from .ranking import Prediction, RankingEngine
from .dictionary import LearningDictionary
from .seed_loader import DEFAULT_SEED_WORDS, seed_if_needed
from .background_learner import BackgroundLearner
from .compose_session import ComposeSession

__all__ = [
    "Trie",
    "WordEntry",
    "WordRecord",
    "WordStore",
    "Prediction",
    "RankingEngine",
    "LearningDictionary",
    "DEFAULT_SEED_WORDS",
    "seed_if_needed",
    "BackgroundLearner",
    "ComposeSession",
]
