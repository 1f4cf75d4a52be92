"""
words.py

Handles loading the dictionary and turning it into letter codes.
Letters are stored as small integers, a=0 ... z=25.
"""

from pathlib import Path

import numpy as np

from infoguess.errors import DecodeError


WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)


def load_word_list(path):
    """Load a newline-separated word list into a Python list."""
    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


def letter_code(symbol: str) -> int:
    """Map one alphabet symbol to its integer code."""
    if len(symbol) != 1 or not 0 <= ord(symbol) - ord("a") < ALPHABET_SIZE:
        raise DecodeError(f"symbol outside the alphabet: {symbol!r}")
    return ord(symbol) - ord("a")


def encode_words(words, length: int = WORD_LENGTH) -> np.ndarray:
    """
    Encode an ordered word sequence as an (N, length) uint8 array of codes.

    Every entry must have exactly `length` symbols from the alphabet. A bad
    entry is rejected with DecodeError instead of being skipped or truncated,
    so no partial dictionary can reach the index.
    """
    codes = np.zeros((len(words), length), dtype=np.uint8)

    for word_id, word in enumerate(words):
        if len(word) != length:
            raise DecodeError(
                f"entry {word_id} ({word!r}) has {len(word)} symbols, expected {length}"
            )
        try:
            codes[word_id] = [letter_code(symbol) for symbol in word]
        except DecodeError as exc:
            raise DecodeError(f"entry {word_id} ({word!r}): {exc}") from exc

    return codes


def decode_word(codes) -> str:
    """Inverse of encode_words for a single row."""
    return "".join(ALPHABET[int(c)] for c in codes)


def load_dictionary(path: Path, length: int = WORD_LENGTH):
    """
    Returns:
        words: list of dictionary words in file order
        codes: (N, length) array of letter codes, row i is WordId i
    """
    words = load_word_list(path)
    return words, encode_words(words, length)
