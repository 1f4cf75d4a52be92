"""
patterns.py

Enumerates the feedback patterns of a word.

A pattern is one LetterState per position. Pattern j in [0, 3^L) is j written
in base 3, digit i giving the state at position i:

    0 = absent
    1 = present elsewhere
    2 = at position

so the bin order is fixed and identical on every run.

Feedback here follows the per-position predicate model: each position is
judged on its own, so a repeated guess letter can be reported "present" more
than once. Standard Wordle duplicate-letter resolution is not applied.
"""

import numpy as np

from infoguess.encoding import has_letter, has_letter_at
from infoguess.predicates import STATE_COUNT, LetterState, Predicate
from infoguess.words import WORD_LENGTH


PATTERN_COUNT = STATE_COUNT**WORD_LENGTH


def state_matrix(length: int = WORD_LENGTH) -> np.ndarray:
    """(3^length, length) array, row j holding the base-3 digits of j."""
    powers = STATE_COUNT ** np.arange(length)
    j = np.arange(STATE_COUNT**length)[:, None]
    return ((j // powers) % STATE_COUNT).astype(np.uint8)


def enumerate_states(length: int = WORD_LENGTH):
    """All 3^length state patterns as tuples of LetterState, in bin order."""
    return [tuple(LetterState(int(s)) for s in row) for row in state_matrix(length)]


def word_patterns(codes):
    """Every pattern of one word as a tuple of Predicates, in bin order."""
    letters = [int(c) for c in codes]
    return [
        tuple(Predicate(letters[pos], state, pos) for pos, state in enumerate(states))
        for states in enumerate_states(len(letters))
    ]


def pattern_matrix(codes) -> np.ndarray:
    """
    Predicate indices for every pattern of one word, shape (3^L, L).

    Same content as word_patterns() but computed in one shot, using
    index = (letter * L + position) * 3 + state.
    """
    letters = np.asarray(codes, dtype=np.int64)
    length = letters.size
    slots = (letters * length + np.arange(length)) * STATE_COUNT
    return slots[None, :] + state_matrix(length).astype(np.int64)


def feedback_code(guess, answer) -> int:
    """Bin of `answer` when `guess` is played, as a base-3 pattern index."""
    code = 0
    for pos, letter in enumerate(guess):
        if answer[pos] == letter:
            state = LetterState.AT_POS
        elif letter in answer:
            state = LetterState.PRESENT
        else:
            state = LetterState.ABSENT
        code += int(state) * STATE_COUNT**pos
    return code


def feedback_codes(guess, letter_sets: np.ndarray, positioned: np.ndarray) -> np.ndarray:
    """feedback_code of `guess` against every dictionary word at once."""
    codes = np.zeros(letter_sets.shape[0], dtype=np.int64)
    for pos, letter in enumerate(guess):
        letter = int(letter)
        state = np.where(
            has_letter_at(positioned, letter, pos),
            int(LetterState.AT_POS),
            np.where(
                has_letter(letter_sets, letter),
                int(LetterState.PRESENT),
                int(LetterState.ABSENT),
            ),
        )
        codes += state * STATE_COUNT**pos
    return codes
