import pytest
from packages.engine import generate_sub_words
from packages.lexicon import DictionaryIndex

YELLOW_SUBWORDS = {"low", "lowly", "lye", "ole", "owe", "owl", "well", "welly",
                   "woe", "yell", "yeow", "yew", "yowl"}

# distractors: too long, or need letters "yellow" does not have enough of
DISTRACTORS = ["yellows", "wool", "lee", "yellowy", "bellow", "ye", "we", "lo"]


@pytest.fixture
def idx():
    return DictionaryIndex(sorted(YELLOW_SUBWORDS) + ["yellow"] + DISTRACTORS)


def test_generate_yellow_golden(idx):
    assert generate_sub_words(idx, "yellow", 3) == YELLOW_SUBWORDS


def test_generate_default_min_length_is_three(idx):
    assert generate_sub_words(idx, "yellow") == YELLOW_SUBWORDS


def test_generate_lower_min_length_adds_short_words(idx):
    assert generate_sub_words(idx, "yellow", 2) == YELLOW_SUBWORDS | {"ye", "we", "lo"}


def test_generate_never_contains_seed(idx):
    out = generate_sub_words(idx, "  YELLOW ", 1)
    assert "yellow" not in out


def test_generate_is_idempotent(idx):
    assert generate_sub_words(idx, "yellow", 3) == generate_sub_words(idx, "yellow", 3)


def test_generate_min_length_above_word_length(idx):
    assert generate_sub_words(idx, "yellow", 7) == set()


@pytest.mark.parametrize("word,min_length", [(None, 3), ("yellow", 0), ("yellow", -1)])
def test_generate_invalid_input_is_empty(idx, word, min_length):
    assert generate_sub_words(idx, word, min_length) == set()


def test_generate_results_are_dictionary_words(idx):
    for w in generate_sub_words(idx, "yellow", 3):
        assert idx.contains(w) and len(w) >= 3


def test_generate_repeated_letters_dedupe():
    idx = DictionaryIndex(["ell", "all", "lal"])
    assert generate_sub_words(idx, "lelal", 3) == {"ell", "all", "lal"}


def test_generate_respects_letter_multiplicity():
    idx = DictionaryIndex(["tot", "toot", "oat"])
    assert generate_sub_words(idx, "tots", 3) == {"tot"}


def test_generate_length_guard():
    idx = DictionaryIndex(["abc"])
    with pytest.raises(ValueError):
        generate_sub_words(idx, "abcdefghijk", 3)
    # explicit opt-out of the guard
    assert generate_sub_words(idx, "abcdefghijk", 3, max_length=None) == {"abc"}


def test_generate_empty_dictionary():
    assert generate_sub_words(DictionaryIndex([]), "yellow", 3) == set()


def test_generate_min_length_above_long_seed_is_empty():
    idx = DictionaryIndex(["abc"])
    assert generate_sub_words(idx, "abcdefghijk", 20) == set()
