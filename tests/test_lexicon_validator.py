from pathlib import Path
from packages.lexicon import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["low", "yell", "yellow", "owl"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["length_histogram"] == [0, 0, 0, 2, 1, 0, 1]
    s = pretty_summary(rep)
    assert "words=4" in s and "longest=6" in s and s.endswith("OK")


def test_validate_wordlist_flags_invalid_lines(tmp_path: Path):
    words = tmp_path / "words.txt"
    # blank, uppercase and punctuation lines are all invalid
    words.write_text("low\n\nYELL\ndon't\nowl\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates_warn_only(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["low", "owl", "low"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_min_length(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["a", "owl"])

    rep = validate_wordlist(str(words), min_length=2)
    assert rep["count"] == 1 and rep["invalid_lines"] == 1


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)
