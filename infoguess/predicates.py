"""
predicates.py

A predicate is one piece of feedback: (letter, state, position).

    ABSENT   letter is not in the word
    PRESENT  letter is in the word but not at `position`
    AT_POS   letter is at `position`

Every predicate maps to a dense index in [0, PREDICATE_COUNT):

    index = (letter * WORD_LENGTH + position) * STATE_COUNT + state

from_index() is its inverse, so the packing can be checked exhaustively.
"""

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from infoguess.encoding import LetterSet, PositionedWord, has_letter, has_letter_at
from infoguess.errors import IndexOutOfRangeError
from infoguess.words import ALPHABET_SIZE, WORD_LENGTH


class LetterState(IntEnum):
    ABSENT = 0
    PRESENT = 1
    AT_POS = 2


STATE_COUNT = len(LetterState)
PREDICATE_COUNT = ALPHABET_SIZE * STATE_COUNT * WORD_LENGTH


@dataclass(frozen=True)
class Predicate:
    letter: int
    state: LetterState
    position: int

    def index(self) -> int:
        if not (
            0 <= self.letter < ALPHABET_SIZE
            and 0 <= self.position < WORD_LENGTH
            and 0 <= int(self.state) < STATE_COUNT
        ):
            raise IndexOutOfRangeError(f"predicate has no index: {self}")
        return (self.letter * WORD_LENGTH + self.position) * STATE_COUNT + int(self.state)

    @classmethod
    def from_index(cls, index: int) -> "Predicate":
        if not 0 <= index < PREDICATE_COUNT:
            raise IndexOutOfRangeError(
                f"predicate index {index} outside [0, {PREDICATE_COUNT})"
            )
        slot, state = divmod(index, STATE_COUNT)
        letter, position = divmod(slot, WORD_LENGTH)
        return cls(letter, LetterState(state), position)

    def matches(self, letter_set: LetterSet, word: PositionedWord) -> bool:
        """Evaluate the predicate against one encoded word."""
        if self.state == LetterState.ABSENT:
            return not letter_set.has(self.letter)
        if self.state == LetterState.PRESENT:
            return letter_set.has(self.letter) and not word.has_at(
                self.letter, self.position
            )
        return word.has_at(self.letter, self.position)

    def mask(self, letter_sets: np.ndarray, positioned: np.ndarray) -> np.ndarray:
        """Vectorised `matches` over a whole dictionary, as a boolean mask."""
        if self.state == LetterState.ABSENT:
            return ~has_letter(letter_sets, self.letter)
        at_pos = has_letter_at(positioned, self.letter, self.position)
        if self.state == LetterState.PRESENT:
            return has_letter(letter_sets, self.letter) & ~at_pos
        return at_pos


def all_predicates():
    """Every predicate, in index order."""
    return [Predicate.from_index(i) for i in range(PREDICATE_COUNT)]


def filter_linear(pattern, letter_sets: np.ndarray, positioned: np.ndarray) -> np.ndarray:
    """
    Surviving WordIds for a pattern without any precomputed index.

    Trades the index memory for one pass over the dictionary per predicate.
    """
    keep = np.ones(letter_sets.shape[0], dtype=bool)
    for pred in pattern:
        keep &= pred.mask(letter_sets, positioned)
    return np.flatnonzero(keep)
