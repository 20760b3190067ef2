# tui_app.py - keyboard simulator on top of the learning dictionary
# -------------------------------------------------------
# Text based terminal UI standing in for the soft keyboard:
#  - Candidate bar updated on every keystroke
#  - The autocorrect slot is highlighted, Tab accepts it
#  - F1-F6 pick a candidate, space commits (and learns) a word
#  - Enter commits the last word and clears the line, Ctrl+S saves
# -------------------------------------------------------

from __future__ import annotations

import time
from typing import List

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from learning_dictionary.core.compose_session import ComposeSession
from learning_dictionary.core.dictionary import LearningDictionary
from learning_dictionary.core.ranking import Prediction

PICK_KEYS = ("f1", "f2", "f3", "f4", "f5", "f6")


def split_current(text: str):
    """('hello wor' -> ('hello ', 'wor')): committed head and the composing word."""
    idx = text.rfind(" ")
    return text[: idx + 1], text[idx + 1:]


class CandidateBar(Static):
    """One line of candidates; autocorrect in bold green."""

    def show(self, predictions: List[Prediction]):
        if not predictions:
            self.update("[dim]No suggestions[/dim]")
            return
        parts = []
        for key, p in zip(PICK_KEYS, predictions):
            label = f"[b]{key.upper()}[/b] "
            if p.is_autocorrect:
                parts.append(label + f"[bold green]{escape(p.text)} (Auto)[/bold green]")
            else:
                parts.append(label + escape(p.text))
        self.update("   ".join(parts))


class StatusLine(Static):
    def show(self, dictionary: LearningDictionary, latency: float):
        self.update(f"[dim]words:[/dim] {len(dictionary)}   [dim]latency:[/dim] {latency * 1000:.2f}ms")


class KeyboardApp(App):
    """
    Architecture:
     - Input.Changed -> composing word -> dictionary.suggest -> candidate bar
     - space typed after a word -> ComposeSession.commit (learn)
     - F-key / Tab -> ComposeSession.select
    """

    BINDINGS = [
        Binding("tab", "accept_autocorrect", "Accept autocorrect", priority=True),
        Binding("ctrl+s", "save", "Save"),
    ] + [Binding(k, f"pick({i})", f"Pick {i + 1}", show=False) for i, k in enumerate(PICK_KEYS)]

    candidates = reactive(list, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, dictionary: LearningDictionary, limit: int = 6):
        super().__init__()
        self.dictionary = dictionary
        self.session = ComposeSession(dictionary, limit=min(limit, len(PICK_KEYS)))
        self._prev_value = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Start typing…", id="text_input")
        yield CandidateBar(id="candidates")
        with Horizontal(id="bottom"):
            yield StatusLine(id="status")
            yield Static(id="notice")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(CandidateBar).show([])
        self.query_one(StatusLine).show(self.dictionary, 0.0)

    # typing ------------------------------------------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        value = event.value
        prev, self._prev_value = self._prev_value, value

        # a single space typed right after a word commits that word
        if value == prev + " ":
            _, word = split_current(prev)
            self.session.clear()
            self.session.type(word)
            self.session.commit()

        _, current = split_current(value)
        self.session.clear()
        self.session.type(current)
        self._refresh_candidates()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        _, current = split_current(event.value)
        self.session.clear()
        self.session.type(current)
        self.session.commit()
        self._set_value("")
        self._refresh_candidates()

    def _refresh_candidates(self) -> None:
        t0 = time.perf_counter()
        self.candidates = self.session.candidates()
        self.latency = time.perf_counter() - t0

    def watch_candidates(self, candidates) -> None:
        self.query_one(CandidateBar).show(candidates)

    def watch_latency(self, latency: float) -> None:
        self.query_one(StatusLine).show(self.dictionary, latency)

    # actions ----------------------------------------------------------------------
    def action_accept_autocorrect(self) -> None:
        if self.candidates and self.candidates[0].is_autocorrect:
            self._apply(self.candidates[0])

    def action_pick(self, index: int) -> None:
        if 0 <= index < len(self.candidates):
            self._apply(self.candidates[index])

    def action_save(self) -> None:
        ok = self.dictionary.save()
        self.query_one("#notice", Static).update("[green]Saved[/green]" if ok else "[red]Save failed[/red]")

    def _apply(self, candidate: Prediction) -> None:
        head, _ = split_current(self.query_one(Input).value)
        committed = self.session.select(candidate)
        self._set_value(head + (committed or self.session.composing))
        self._refresh_candidates()

    def _set_value(self, value: str) -> None:
        # record first so the Changed event is not mistaken for typing
        self._prev_value = value
        box = self.query_one(Input)
        box.value = value
        box.cursor_position = len(value)
