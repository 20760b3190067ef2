# logger_utils.py -  logging setup for the hosts, plus timing helpers

import logging
import os
import time

from rich.logging import RichHandler

# Directory where all log files will be stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "learning_dictionary.log")

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"

log = logging.getLogger("learning_dictionary")


def setup_logging(level="INFO", path=DEFAULT_LOG_PATH, console=True):
    """
    Configure the package logger once for a host (CLI/TUI).
    Library modules only call logging.getLogger(__name__).
    path=None skips the file handler; console=False skips rich output
    (the TUI owns the terminal).
    """
    log.setLevel(level.upper() if isinstance(level, str) else level)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()

    if console:
        log.addHandler(RichHandler(show_path=False, markup=False, rich_tracebacks=True))
    if path:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        log.addHandler(fh)
    if not log.handlers:
        log.addHandler(logging.NullHandler())
    log.propagate = False
    return log


class Log:
    """Timing helpers that report through the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: bench done: 0.123s
        """
        log.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load"):
                do_some_work()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = None
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
