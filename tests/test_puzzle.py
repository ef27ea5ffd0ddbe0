import random
from collections import Counter

import pytest
from packages.engine import NoWordFoundError, create_puzzle
from packages.engine.session import guess, is_complete, progress, remaining
from packages.lexicon import DictionaryIndex

WORDS = ["yellow", "planet", "low", "lowly", "lye", "ole", "owe", "owl", "well", "welly",
         "woe", "yell", "yeow", "yew", "yowl", "plane", "plant", "plate", "pleat", "leant",
         "lane", "pale", "peal", "pant", "tape", "ant", "ape", "apt", "eat", "lap", "nap",
         "net", "pan", "pat", "pen", "tan", "tea", "ten", "ye", "an"]


@pytest.fixture
def idx():
    return DictionaryIndex(WORDS)


def test_create_puzzle_invariants(idx):
    rng = random.Random(11)
    for _ in range(10):
        p = create_puzzle(idx, 6, 3, rng=rng)
        assert p.original in ("yellow", "planet")
        assert len(p.original) == 6
        assert p.scrambled != p.original
        assert Counter(p.scrambled) == Counter(p.original)
        assert p.sub_words
        for w, solved in p.sub_words.items():
            assert solved is False
            assert len(w) >= 3 and idx.contains(w) and w != p.original
        assert list(p.sub_words) == sorted(p.sub_words)


def test_create_puzzle_default_min_length(idx):
    p = create_puzzle(idx, 6, rng=random.Random(1))
    assert all(len(w) >= 3 for w in p.sub_words)


def test_create_puzzle_is_reproducible_with_seed(idx):
    a = create_puzzle(idx, 6, 3, rng=random.Random(5))
    b = create_puzzle(idx, 6, 3, rng=random.Random(5))
    assert a == b


def test_create_puzzle_yellow_answers():
    idx = DictionaryIndex(["yellow", "low", "owl", "yew", "we"])
    p = create_puzzle(idx, 6, 3, rng=random.Random(0))
    assert p.original == "yellow"
    assert list(p.sub_words) == ["low", "owl", "yew"]


def test_create_puzzle_no_word_of_length(idx):
    with pytest.raises(NoWordFoundError):
        create_puzzle(idx, 9, 3)


@pytest.mark.parametrize("length,min_length", [
    (None, 3), (2, 1), (6, 0), (6, -2), (5, 6),
])
def test_create_puzzle_invalid_args(idx, length, min_length):
    with pytest.raises(ValueError):
        create_puzzle(idx, length, min_length)


def test_puzzle_to_dict(idx):
    p = create_puzzle(idx, 6, 4, rng=random.Random(2))
    d = p.to_dict()
    assert d["original"] == p.original and d["scrambled"] == p.scrambled
    assert d["sub_words"] == p.sub_words


def test_session_guessing():
    idx = DictionaryIndex(["yellow", "low", "owl", "yew"])
    p = create_puzzle(idx, 6, 3, rng=random.Random(0))
    assert progress(p) == (0, 3)
    assert guess(p, " OWL ") is True
    assert guess(p, "owl") is False          # already solved
    assert guess(p, "yellow") is False       # the seed is not an answer
    assert guess(p, None) is False
    assert remaining(p) == ["low", "yew"]
    assert not is_complete(p)
    guess(p, "low")
    guess(p, "yew")
    assert is_complete(p) and progress(p) == (3, 3)


def test_create_puzzle_seed_length_guard_checked_before_pick():
    for words in (["abcdefghijk", "abc"], ["abc"]):
        with pytest.raises(ValueError) as e:
            create_puzzle(DictionaryIndex(words), 11, 3)
        assert "abcdefghijk" not in str(e.value)
        assert "max_seed_length" in str(e.value)


def test_create_puzzle_seed_length_guard_can_be_lifted():
    p = create_puzzle(DictionaryIndex(["abcdefghijk", "abc"]), 11, 3,
                      rng=random.Random(0), max_seed_length=None)
    assert p.original == "abcdefghijk"
    assert list(p.sub_words) == ["abc"]


def test_puzzle_is_hashable(idx):
    p = create_puzzle(idx, 6, 3, rng=random.Random(4))
    q = create_puzzle(idx, 6, 3, rng=random.Random(4))
    assert hash(p) == hash(q)
    assert len({p, q}) == 1
