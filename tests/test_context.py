# tests/test_context.py
from learning_dictionary.context import extract_words, normalize_text, simple_tokenize


def test_normalize_strips_symbols_and_whitespace():
    assert normalize_text("  Halo,\tapa   kabar?! ") == "Halo apa kabar"
    assert normalize_text("") == ""


def test_tokenize_trims_edges_and_drops_noise():
    assert simple_tokenize("don't -- 'quoted' well-known _x_") == ["don't", "quoted", "well-known", "x"]
    assert simple_tokenize("") == []


def test_extract_words_keeps_casing():
    assert extract_words("Selamat Malam!") == ["Selamat", "Malam"]
