"""
learning_dictionary

Predictive-text core of a soft keyboard: learns committed words and answers
prefix queries with a ranked, bounded candidate list.
"""

from learning_dictionary.core import (
    BackgroundLearner,
    ComposeSession,
    LearningDictionary,
    Prediction,
)

__all__ = ["LearningDictionary", "Prediction", "ComposeSession", "BackgroundLearner"]

__version__ = "0.1.0"
