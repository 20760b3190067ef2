# learning_dictionary/core/compose_session.py
"""
ComposeSession - the input-dispatcher side of the keyboard.

Holds the word being composed and turns keyboard events into dictionary
calls:
  type(chars)      extend the composing word
  backspace()      drop the last composed char
  candidates()     Prediction records for the candidate bar
  commit(sep)      finish the word: learn it, return the committed text
  select(pred)     one dispatch for any tapped candidate

Selecting the autocorrect candidate only replaces the composing word (it is
learned when committed); selecting a plain suggestion commits it with a
trailing space and learns it right away.
"""

from __future__ import annotations

from typing import List, Optional

from learning_dictionary.core.ranking import Prediction


class ComposeSession:
    def __init__(self, dictionary, limit: Optional[int] = None):
        self.dictionary = dictionary
        self.limit = limit
        self._buf: List[str] = []

    @property
    def composing(self) -> str:
        return "".join(self._buf)

    def type(self, chars: str) -> str:
        self._buf.extend(chars)
        return self.composing

    def backspace(self) -> str:
        if self._buf:
            self._buf.pop()
        return self.composing

    def clear(self) -> None:
        self._buf.clear()

    def candidates(self, limit: Optional[int] = None) -> List[Prediction]:
        lim = limit if limit is not None else self.limit
        return self.dictionary.suggest(self.composing, lim)

    def commit(self, separator: str = " ") -> str:
        word = self.composing
        if word:
            self.dictionary.learn(word)
            self._buf.clear()
        return word + separator

    def select(self, candidate: Prediction) -> str:
        """Apply a tapped candidate. Returns the text committed (may be '')."""
        if candidate.is_autocorrect:
            self._buf = list(candidate.text)
            return ""
        self._buf.clear()
        self.dictionary.learn(candidate.text)
        return candidate.text + " "
