# model_store.py - persistence layer for the learning dictionary

# handles saving and loading the word table:
# - the store is written as JSON records (word, frequency, recency, display)
# - the prefix index is never written; it is rebuilt from the word keys
# - storage is hidden behind a tiny backend interface (read/write bytes) so a
#   flat file, an in-memory buffer or anything else can hold the data
# - everything is best-effort: bad or missing data means an empty store

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

from learning_dictionary.core.word_store import WordRecord

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class CorruptDataError(ValueError):
    """Raised internally when stored data cannot be decoded."""


# Backends -------------------
class StorageBackend(Protocol):
    def read(self) -> Optional[bytes]:
        """Return stored bytes, or None when nothing was saved yet."""
        ...

    def write(self, data: bytes) -> None:
        ...


class FileBackend:
    """Single JSON file. Writes go to a temp file first, then os.replace."""

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = Path(path)

    def read(self) -> Optional[bytes]:
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def write(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def __repr__(self) -> str:
        return f"FileBackend({str(self.path)!r})"


class MemoryBackend:
    """Keeps the last written payload in memory."""

    def __init__(self, data: Optional[bytes] = None):
        self.data = data
        self.writes = 0
        self._lock = threading.Lock()

    def read(self) -> Optional[bytes]:
        with self._lock:
            return self.data

    def write(self, data: bytes) -> None:
        with self._lock:
            self.data = bytes(data)
            self.writes += 1


# Codec ---------------
def encode(records: Iterable[WordRecord]) -> bytes:
    entries = []
    for r in records:
        item = {"word": r.word, "frequency": r.frequency, "recency": r.recency}
        if r.display and r.display != r.word:
            item["display"] = r.display
        entries.append(item)
    payload = {"version": FORMAT_VERSION, "entries": entries}
    # ascii escapes keep lone surrogates writable; json.loads restores them
    return json.dumps(payload, indent=1).encode("utf-8")


def _is_count(v) -> bool:
    # bool is an int subclass; reject it along with floats/strings
    return isinstance(v, int) and not isinstance(v, bool)


def _decode_record(item) -> WordRecord:
    if not isinstance(item, dict):
        raise CorruptDataError(f"record is not an object: {item!r}")
    try:
        word, freq, rec = item["word"], item["frequency"], item["recency"]
    except KeyError as e:
        raise CorruptDataError(f"record missing {e.args[0]!r}") from None
    display = item.get("display")

    if not isinstance(word, str) or not word.strip():
        raise CorruptDataError(f"bad word {word!r}")
    if not _is_count(freq) or freq < 1:
        raise CorruptDataError(f"bad frequency {freq!r} for {word!r}")
    if not _is_count(rec) or rec < 0:
        raise CorruptDataError(f"bad recency {rec!r} for {word!r}")
    if display is not None and not isinstance(display, str):
        raise CorruptDataError(f"bad display form {display!r} for {word!r}")

    key = word.strip().lower()
    return WordRecord(key, freq, rec, display or None)


def decode(raw: bytes) -> List[WordRecord]:
    """
    Parse stored bytes into records sorted by ascending recency.
    Raises CorruptDataError on anything unexpected.
    """
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorruptDataError(f"undecodable payload: {e}") from e

    if not isinstance(payload, dict) or payload.get("version") != FORMAT_VERSION:
        raise CorruptDataError("unknown payload version")
    items = payload.get("entries")
    if not isinstance(items, list):
        raise CorruptDataError("entries is not a list")

    # duplicate keys: keep the most recently learned
    latest: Dict[str, WordRecord] = {}
    for item in items:
        rec = _decode_record(item)
        prev = latest.get(rec.word)
        if prev is None or rec.recency > prev.recency:
            latest[rec.word] = rec
    return sorted(latest.values(), key=lambda r: r.recency)


# Public helpers -------------------------
def load_words(backend: StorageBackend) -> List[WordRecord]:
    """
    Load the word table from `backend`.
    Returns:
        list[WordRecord]: ascending recency, or [] if missing/there is an error.
    """
    try:
        raw = backend.read()
    except OSError as e:
        logger.warning("load_words: backend %r unreadable, starting empty: %s", backend, e)
        return []
    if not raw:
        logger.info("load_words: no saved dictionary; cold start")
        return []
    try:
        records = decode(raw)
    except CorruptDataError as e:
        logger.warning("load_words: stored dictionary is corrupt, starting empty: %s", e)
        return []
    logger.info("Loaded dictionary (%d words)", len(records))
    return records


def save_words(records: Iterable[WordRecord], backend: StorageBackend) -> bool:
    """
    Save the word table to `backend`.
    Returns True on success; failures are logged, never raised.
    """
    records = list(records)
    try:
        backend.write(encode(records))
    except (OSError, TypeError, ValueError) as e:
        logger.warning("save_words: could not write to %r: %s", backend, e)
        return False
    logger.debug("Saved dictionary (%d words)", len(records))
    return True
