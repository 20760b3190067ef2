# metrics_tracker.py - running averages for latency readouts (/stats)

import json
import logging
import os
import threading
from collections import defaultdict

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._lock = threading.Lock()
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("metrics file %s ignored: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        with self._lock:
            d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        try:
            with open(self.path, "w", encoding="utf8") as f:
                json.dump(d, f, indent=2)
        except OSError as e:
            logger.warning("could not write metrics %s: %s", self.path, e)

    def record(self, key, val):
        with self._lock:
            self.m[key] += val
            self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        """{key: (count, avg)} in key order."""
        return {k: (self.n[k], self.avg(k)) for k in sorted(self.m)}
