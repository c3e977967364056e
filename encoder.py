# encoder.py
# Letter-presence bitmasks: bit i is set iff the i-th letter of the alphabet
# appears in the word ('a' -> bit 0, 'z' -> bit 25).

from typing import Iterable, List, NamedTuple, Optional

from utils import WORD_LENGTH, ALPHABET_SIZE


class Word(NamedTuple):
    text: str
    mask: int


def letter_index(ch: str) -> int:
    idx = ord(ch) - ord("a")
    if not 0 <= idx < ALPHABET_SIZE:
        raise ValueError(f"Unsupported char: {ch!r} (use a-z)")
    return idx


def all_distinct_letters(word: str) -> bool:
    """True if no letter appears twice in ``word``."""
    seen = [False] * ALPHABET_SIZE
    for ch in word:
        idx = letter_index(ch)
        if seen[idx]:
            return False
        seen[idx] = True
    return True


def word_to_mask(word: str) -> Optional[int]:
    """Return the 26-bit mask for ``word``, or None if a letter repeats."""
    mask = 0
    for ch in word:
        bit = 1 << letter_index(ch)
        if mask & bit:
            return None
        mask |= bit
    return mask


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def is_candidate(word: str, word_length: int = WORD_LENGTH) -> bool:
    """A word can take part in a tuple only if it has exactly ``word_length``
    lowercase letters and none of them repeat."""
    if len(word) != word_length:
        return False
    if not (word.isascii() and word.isalpha() and word.islower()):
        return False
    return all_distinct_letters(word)


def encode_words(words: Iterable[str], word_length: int = WORD_LENGTH) -> List[Word]:
    """Encode the candidates among ``words``, keeping input order.

    Non-candidates are dropped without complaint; they can never be part of a
    solution.
    """
    encoded = []
    for w in words:
        if not is_candidate(w, word_length):
            continue
        encoded.append(Word(w, word_to_mask(w)))
    return encoded
