# config_manager.py - JSON config manager

import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 6,  # one autocorrect slot + five suggestions
    "lookup_cap": 48,  # soft cap on prefix candidates
    "max_vocabulary": 0,  # 0 = unbounded
    "autosave": True,
    "autosave_every": 10,  # learns per batched write
    "autosave_interval": 5.0,  # idle tick, seconds
    "data_path": os.path.join("data", "dictionary.json"),
    "seed_words": ["AnKeyboard", "Halo", "Apa", "Kabar", "Selamat", "Malam"],
    "log_level": "INFO",
}


class Config:
    """
    Dictionary settings backed by a JSON file.
    path=None keeps everything in memory (tests, embedding hosts).
    """

    def __init__(self, path="config.json", **overrides):
        self.path = path
        self.data = copy.deepcopy(DEFAULTS)
        self._load()
        for k, v in overrides.items():
            self.set(k, v, persist=False)

    def _load(self):
        if not self.path:
            return
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(stored, dict):
            logger.warning("config %s is not an object, using defaults", self.path)
            return
        for k, v in stored.items():
            if k not in self.data:
                logger.debug("ignoring unknown config key %r", k)
                continue
            try:
                self.set(k, v, persist=False)
            except ValueError as e:
                logger.warning("config %s: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        try:
            with open(self.path, "w", encoding="utf8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning("could not write config %s: %s", self.path, e)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val, persist=True):
        """Coerce `val` to the default's type. Raises KeyError/ValueError."""
        if key not in DEFAULTS:
            raise KeyError(key)
        self.data[key] = _coerce(key, DEFAULTS[key], val)
        if persist:
            self.save()


def _coerce(key, default, val):
    try:
        if isinstance(default, bool):
            if isinstance(val, str):
                low = val.strip().lower()
                if low in ("1", "true", "yes", "on"):
                    return True
                if low in ("0", "false", "no", "off"):
                    return False
                raise ValueError(val)
            return bool(val)
        if isinstance(default, list):
            if isinstance(val, str):
                return [w for w in val.replace(",", " ").split() if w]
            return [str(w) for w in val]
        if isinstance(default, int):
            if isinstance(val, float) and not val.is_integer():
                raise ValueError(val)
            out = int(val)
            if out < 0:
                raise ValueError(val)
            return out
        return type(default)(val)
    except (TypeError, ValueError):
        raise ValueError(f"bad value for {key}: {val!r}") from None
