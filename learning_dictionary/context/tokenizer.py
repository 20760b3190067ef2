# learning_dictionary/context/tokenizer.py
# splits committed or background text into learnable words

_EDGE = "'-_"


def simple_tokenize(s: str):
    """
    Return list of words. Tokens with no letters or digits are dropped,
    leading/trailing apostrophes and hyphens are trimmed.
    """
    if not s:
        return []
    out = []
    for t in s.split():
        t = t.strip(_EDGE)
        if t and any(ch.isalnum() for ch in t):
            out.append(t)
    return out
