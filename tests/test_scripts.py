from script.fetch_wordlist import extract_words
from script.normalize_wordlist import normalize


def test_normalize_dedupes_and_lowercases():
    lines = ["Yellow", " low ", "", "LOW", "don't", "owl"]
    assert normalize(lines) == ["yellow", "low", "don't", "owl"]
    assert normalize(lines, letters_only=True) == ["yellow", "low", "owl"]


def test_extract_words_plain_text():
    assert extract_words("Apple\nbee\napple\nx-ray\n42\n") == ["apple", "bee"]


def test_extract_words_html():
    html = "<html><body><ul><li>Level</li><li>eye</li><li>level</li></ul></body></html>"
    assert extract_words(html, is_html=True) == ["level", "eye"]
