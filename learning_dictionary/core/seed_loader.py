# learning_dictionary/core/seed_loader.py
# Bootstraps a tiny vocabulary on first run so the candidate bar is not empty
# before the user has typed anything.

from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEED_WORDS = ("AnKeyboard", "Halo", "Apa", "Kabar", "Selamat", "Malam")

PROBE_PREFIX = "a"
MIN_RESULTS = 2


def needs_seed(dictionary, probe: str = PROBE_PREFIX, minimum: int = MIN_RESULTS) -> bool:
    """True when a baseline prefix probe returns fewer than `minimum` words."""
    return len(dictionary.predict(probe, limit=minimum)) < minimum


def seed_if_needed(
    dictionary,
    words: Optional[Iterable[str]] = None,
    probe: str = PROBE_PREFIX,
    minimum: int = MIN_RESULTS,
) -> int:
    """
    Feed the default words through learn() when the vocabulary is too small.
    Returns how many words were learned (0 if seeding was not needed).
    """
    if not needs_seed(dictionary, probe, minimum):
        return 0

    seeds = list(DEFAULT_SEED_WORDS if words is None else words)
    learned = 0
    for w in seeds:
        if isinstance(w, str) and w.strip():
            dictionary.learn(w)
            learned += 1
    logger.info("seeded dictionary with %d default words", learned)
    return learned
