# learning_dictionary/context/normalizer.py
import re

_strip_re = re.compile(r"[^\w\s'-]")  # keep apostrophes/hyphens inside words


def normalize_text(s: str) -> str:
    if not s:
        return ""
    s = s.strip()
    # normalize weird whitespace
    s = " ".join(s.split())
    # remove control chars and odd symbols, casing is left alone for display
    return _strip_re.sub("", s)
