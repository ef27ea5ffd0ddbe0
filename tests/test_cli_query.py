import pytest
from apps.cli.query import main


@pytest.fixture
def words_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("yellow\nlow\nowl\nyew\nlevel\neye\na\n", encoding="utf-8")
    return str(p)


def test_query_subwords(words_file, capsys):
    main(["--words", words_file, "subwords", "yellow"])
    assert capsys.readouterr().out.split() == ["low", "owl", "yew"]


def test_query_palindromes(words_file, capsys):
    main(["--words", words_file, "palindromes"])
    assert capsys.readouterr().out.split() == ["eye", "level"]


def test_query_exists(words_file, capsys):
    main(["--words", words_file, "exists", "OWL"])
    assert capsys.readouterr().out.strip() == "true"


def test_query_random_no_match_exits(words_file):
    with pytest.raises(SystemExit) as e:
        main(["--words", words_file, "random", "--length", "12"])
    assert e.value.code == 1
