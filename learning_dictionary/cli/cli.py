"""
cli.py - command line host for the learning dictionary
Features:
- Type words to commit them; the dictionary learns each one
- Candidate bar per prefix with the autocorrect slot marked
- Background learning, manual save, config edits, latency stats
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from learning_dictionary.context import extract_words
from learning_dictionary.core.background_learner import BackgroundLearner
from learning_dictionary.core.compose_session import ComposeSession
from learning_dictionary.core.dictionary import LearningDictionary
from learning_dictionary.core.ranking import Prediction
from learning_dictionary.utils.config_manager import Config
from learning_dictionary.utils.logger_utils import Log, setup_logging
from learning_dictionary.utils.metrics_tracker import Metrics
from learning_dictionary.utils.threaded_runner import run_parallel

HELP = (
    "cmds: /suggest <prefix>, /pick <n> <prefix>, /learn <text>, /bg <text>\n"
    "      /top [n], /stats, /save, /config [key val], /bench, /help, /quit\n"
    "plain text is typed and committed word by word"
)


class CLI:
    """Command-line host: routes input lines to the dictionary and prints results."""

    def __init__(self, dictionary: LearningDictionary, cfg: Config, console: Optional[Console] = None):
        self.dictionary = dictionary
        self.cfg = cfg
        self.console = console or Console()
        self.metrics = Metrics()
        self.session = ComposeSession(dictionary, limit=cfg.get("max_suggestions"))
        self.background = BackgroundLearner(dictionary)
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompts for a line
        - slash commands are dispatched, anything else is typed + committed
        """
        self.console.rule("[bold magenta]Learning Dictionary[/bold magenta]")
        self.console.print(f"[cyan]{len(self.dictionary)} words loaded.[/cyan] /help for commands\n")
        while self.running:
            try:
                line = Prompt.ask("[green]type[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)
        self.shutdown()

    def shutdown(self):
        self.background.shutdown(wait=True)
        self.dictionary.close()
        self.console.print("bye.")

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str):
        line = (line or "").strip()
        if not line:
            return
        if not line.startswith("/"):
            self._type_text(line)
            return

        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad command:[/red] {e}")
            return
        c, args = p[0].lower(), p[1:]

        if c in ("/q", "/quit", "/exit"):
            self.running = False
        elif c == "/help":
            self.console.print(HELP)
        elif c == "/suggest" and args:
            self._show_suggestions(args[0])
        elif c == "/pick" and len(args) == 2 and args[0].isdigit():
            self._pick(int(args[0]), args[1])
        elif c == "/learn" and args:
            n = self.dictionary.learn_text(" ".join(args))
            self.console.print(f"[cyan]learned {n} word(s)[/cyan]")
        elif c == "/bg" and args:
            fut = self.background.submit(" ".join(args))
            self.console.print("[dim]queued for background learning[/dim]")
            fut.add_done_callback(lambda f: self.metrics.record("background_words", f.result()))
        elif c == "/top":
            self._show_top(int(args[0]) if args and args[0].isdigit() else 10)
        elif c == "/stats":
            self._show_stats()
        elif c == "/save":
            ok = self.dictionary.save()
            self.console.print("[green]saved[/green]" if ok else "[red]save failed (see log)[/red]")
        elif c == "/config":
            self._config(args)
        elif c == "/bench":
            self._bench()
        else:
            self.console.print(f"[red]Unknown command:[/red] {line}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _type_text(self, text: str):
        """Each word: show the candidate bar for it, then commit (learn) it."""
        words = extract_words(text)
        for word in words:
            self.session.clear()
            self.session.type(word)
            self._timed_candidates(word)
            t0 = time.perf_counter()
            self.session.commit()
            self.metrics.record("learn_time", time.perf_counter() - t0)
        self.console.print(f"[dim]committed {len(words)} word(s)[/dim]")

    def _timed_candidates(self, prefix: str) -> List[Prediction]:
        t0 = time.perf_counter()
        preds = self.dictionary.suggest(prefix, self.cfg.get("max_suggestions"))
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        return preds

    def _pick(self, n: int, prefix: str):
        """Select candidate #n for `prefix` through the session's select()."""
        self.session.clear()
        self.session.type(prefix)
        preds = self.session.candidates()
        if not 1 <= n <= len(preds):
            self.console.print("[red]no such candidate[/red]")
            return
        chosen = preds[n - 1]
        committed = self.session.select(chosen)
        if chosen.is_autocorrect:
            committed = self.session.commit()
        self.console.print(f"[green]Accepted:[/green] {committed.strip()}")

    # DISPLAY -------------------------------------------------------------------------------
    def _show_suggestions(self, prefix: str):
        preds = self._timed_candidates(prefix)
        if not preds:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        table = Table(title=f"Predictions for '{prefix}'", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        table.add_column("Slot", style="dim")
        for i, p in enumerate(preds, 1):
            entry = self.dictionary.get(p.text)
            table.add_row(
                str(i),
                p.text,
                str(entry.frequency) if entry else "-",
                "autocorrect" if p.is_autocorrect else "suggestion",
            )
        self.console.print(table)

    def _show_top(self, n: int):
        table = Table(title="Most learned", box=box.SIMPLE, show_edge=False)
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        table.add_column("Recency", justify="right", style="dim")
        for r in self.dictionary.top(n):
            table.add_row(r.display or r.word, str(r.frequency), str(r.recency))
        self.console.print(table)

    def _show_stats(self):
        self.console.print(f"words: {len(self.dictionary)}  sequence: {self.dictionary.sequence}")
        saver = self.dictionary.autosaver
        if saver is not None:
            self.console.print(f"autosave: {saver.saves} saves, {saver.pending} pending, {saver.failures} failed")
        for k, (count, avg) in self.metrics.summary().items():
            self.console.print(f"  {k:18} n={count:<6} avg={avg * 1000:.3f} ms" if k.endswith("_time")
                               else f"  {k:18} n={count:<6} total={self.metrics.m[k]:.0f}")

    def _config(self, args: List[str]):
        if not args:
            for k, v in self.cfg.items():
                self.console.print(f"{k:18} = {v}")
            return
        if len(args) < 2:
            self.console.print("[red]usage: /config <key> <value>[/red]")
            return
        try:
            self.cfg.set(args[0], " ".join(args[1:]))
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {args[0]}")
            return
        except ValueError as e:
            self.console.print(f"[red]{e}[/red]")
            return
        if args[0] == "max_suggestions":
            self.session.limit = self.cfg.get("max_suggestions")
        self.console.print(f"{args[0]} = {self.cfg.get(args[0])} [dim](some keys apply on restart)[/dim]")

    def _bench(self, rounds: int = 200):
        """Rough latency check: concurrent learners while predicting."""
        probes = [chr(c) for c in range(ord("a"), ord("z") + 1)]
        with Log.time_block("bench"):
            run_parallel(
                [lambda i=i: self.dictionary.learn(f"bench{i % 20}") for i in range(rounds)]
                + [lambda p=p: self._timed_candidates(p) for p in probes],
                max_workers=4,
            )
        self.console.print(f"suggest avg: {self.metrics.avg('suggest_time') * 1000:.3f} ms")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="learning-dictionary", description="Learning dictionary shell")
    ap.add_argument("--config", default="config.json", help="JSON config path")
    ap.add_argument("--data", help="dictionary file (overrides config data_path)")
    ap.add_argument("--limit", type=int, help="candidates per prefix")
    ap.add_argument("--max-vocab", type=int, help="evict beyond this many words (0 = unbounded)")
    ap.add_argument("--no-seed", action="store_true", help="skip first-run seeding")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING...")
    ap.add_argument("--tui", action="store_true", help="start the textual UI instead")
    return ap


def load_config(args) -> Config:
    cfg = Config(args.config)
    if args.data:
        cfg.set("data_path", args.data, persist=False)
    if args.limit is not None:
        cfg.set("max_suggestions", args.limit, persist=False)
    if args.max_vocab is not None:
        cfg.set("max_vocabulary", args.max_vocab, persist=False)
    if args.log_level:
        cfg.set("log_level", args.log_level, persist=False)
    return cfg


def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = load_config(args)
    setup_logging(cfg.get("log_level"), console=not args.tui)

    with Log.time_block("startup"):
        dictionary = LearningDictionary.open(cfg, seed=not args.no_seed)

    if args.tui:
        from learning_dictionary.tui_app import KeyboardApp

        try:
            KeyboardApp(dictionary, limit=cfg.get("max_suggestions")).run()
        finally:
            dictionary.close()
        return 0

    CLI(dictionary, cfg).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
