"""
encoding.py

Bit-packed word encodings used to evaluate predicates in constant time.

LetterSet      one bit per letter, set if the letter occurs anywhere.
PositionedWord one 5-bit field per position holding (letter + 1):

    empty = 0b00000
    a     = 0b00001
    ...
    z     = 0b11010

Both fit in 32 bits for 5-letter words, so the per-dictionary versions are
plain uint32 arrays indexed by WordId.
"""

from typing import NamedTuple

import numpy as np

from infoguess.words import ALPHABET_SIZE


FIELD_BITS = 5
FIELD_MASK = (1 << FIELD_BITS) - 1


class LetterSet(NamedTuple):
    bits: int = 0

    @classmethod
    def from_word(cls, codes) -> "LetterSet":
        bits = 0
        for c in codes:
            bits |= 1 << int(c)
        return cls(bits)

    def has(self, letter: int) -> bool:
        return (self.bits >> letter) & 1 == 1

    def letters(self) -> list:
        return [letter for letter in range(ALPHABET_SIZE) if self.has(letter)]


class PositionedWord(NamedTuple):
    packed: int = 0

    @classmethod
    def from_word(cls, codes) -> "PositionedWord":
        packed = 0
        for pos, c in enumerate(codes):
            packed |= (int(c) + 1) << (pos * FIELD_BITS)
        return cls(packed)

    def has_at(self, letter: int, pos: int) -> bool:
        return (self.packed >> (pos * FIELD_BITS)) & FIELD_MASK == letter + 1

    def letter_at(self, pos: int):
        """Letter code at `pos`, or None if the field is unset."""
        field = (self.packed >> (pos * FIELD_BITS)) & FIELD_MASK
        return field - 1 if field else None


def letter_sets(codes: np.ndarray) -> np.ndarray:
    """LetterSet bits for every row of an (N, L) code array."""
    bits = np.left_shift(np.uint32(1), codes.astype(np.uint32))
    return np.bitwise_or.reduce(bits, axis=1).astype(np.uint32)


def positioned_words(codes: np.ndarray) -> np.ndarray:
    """PositionedWord packing for every row of an (N, L) code array."""
    shifts = np.arange(codes.shape[1], dtype=np.uint32) * FIELD_BITS
    fields = np.left_shift(codes.astype(np.uint32) + 1, shifts)
    return fields.sum(axis=1, dtype=np.uint32)


def has_letter(sets: np.ndarray, letter: int) -> np.ndarray:
    """Boolean mask of the words whose LetterSet contains `letter`."""
    return (sets >> np.uint32(letter)) & np.uint32(1) == 1


def has_letter_at(packed: np.ndarray, letter: int, pos: int) -> np.ndarray:
    """Boolean mask of the words with `letter` at `pos`."""
    fields = (packed >> np.uint32(pos * FIELD_BITS)) & np.uint32(FIELD_MASK)
    return fields == letter + 1

