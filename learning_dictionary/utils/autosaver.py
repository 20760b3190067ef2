# autosaver.py - deferred, batched persistence on a worker thread
"""
Autosaver
---------
Keeps disk writes off the typing path.
 - notify() is called after every learn; it only bumps a counter
 - the worker saves once `every` learns are pending, or when `interval`
   seconds pass with unsaved changes (idle tick)
 - flush() saves synchronously (shutdown); stop() flushes and joins

The snapshot callable is expected to copy state under the owner's lock;
the write itself happens here, outside that lock. Losing the last few
learns on a crash is acceptable.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List

from learning_dictionary.core.word_store import WordRecord
from learning_dictionary.utils.model_store import StorageBackend, save_words

logger = logging.getLogger(__name__)


class Autosaver:
    def __init__(
        self,
        snapshot: Callable[[], List[WordRecord]],
        backend: StorageBackend,
        *,
        every: int = 10,
        interval: float = 5.0,
    ):
        self._snapshot = snapshot
        self.backend = backend
        self.every = max(1, int(every))
        self.interval = float(interval)

        self._pending = 0
        self._lock = threading.Lock()   # guards _pending
        self._save_lock = threading.Lock()  # one write at a time
        self._wake = threading.Event()
        self._stopping = False
        self._thread: threading.Thread | None = None
        self.saves = 0
        self.failures = 0

    # Lifecycle -------------------------------------------------------------
    def start(self) -> "Autosaver":
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._run, name="dictionary-autosave", daemon=True
            )
            self._thread.start()
        return self

    def stop(self) -> bool:
        """Stop the worker and write anything still pending."""
        self._stopping = True
        self._wake.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        return self.flush()

    # Hooks ----------------------------------------------------------------------
    def notify(self, n: int = 1) -> None:
        with self._lock:
            self._pending += n
            due = self._pending >= self.every
        if due:
            self._wake.set()

    @property
    def pending(self) -> int:
        with self._lock:
            return self._pending

    def flush(self, force: bool = False) -> bool:
        """
        Save now if there are unsaved learns (always, with force).
        Returns False only on failure.
        """
        with self._save_lock:
            with self._lock:
                taken = self._pending
                self._pending = 0
            if not taken and not force:
                return True
            ok = save_words(self._snapshot(), self.backend)
            if ok:
                self.saves += 1
            else:
                self.failures += 1
                # keep them pending so the next tick retries
                with self._lock:
                    self._pending += taken
            return ok

    # Worker ------------------------------------------------------------------
    def _run(self) -> None:
        while not self._stopping:
            self._wake.wait(self.interval)
            self._wake.clear()
            if self._stopping:
                break
            try:
                self.flush()
            except Exception:
                # snapshot bugs must not kill the worker silently
                logger.exception("autosave failed")
