from .scramble import scramble
from .search import exists, palindromes, by_prefix, by_search, pick_random_word
from .subwords import generate_sub_words, DEFAULT_MIN_LENGTH, MAX_SEED_LENGTH
from .puzzle import Puzzle, NoWordFoundError, create_puzzle, MIN_PUZZLE_LENGTH

__all__ = [
    "scramble", "exists", "palindromes", "by_prefix", "by_search", "pick_random_word",
    "generate_sub_words", "DEFAULT_MIN_LENGTH", "MAX_SEED_LENGTH",
    "Puzzle", "NoWordFoundError", "create_puzzle", "MIN_PUZZLE_LENGTH",
]
