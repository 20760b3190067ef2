# learning_dictionary/context/__init__.py
# text helpers used before words reach the dictionary

from .normalizer import normalize_text  # strips odd symbols, collapses whitespace
from .tokenizer import simple_tokenize  # splits text into learnable words


def extract_words(text: str):
    """normalize then tokenize; the path background text takes into learn()."""
    return simple_tokenize(normalize_text(text))


__all__ = [
    "normalize_text",
    "simple_tokenize",
    "extract_words",
]
