"""
context.py

The scoring context: dictionary, per-word encodings and predicate index,
built once up front and then only read. Everything that scores words takes
the context explicitly; nothing is cached at module level.
"""

from typing import NamedTuple, Optional

from infoguess.encoding import LetterSet, PositionedWord, letter_sets, positioned_words
from infoguess.errors import EmptyDictionaryError
from infoguess.index import PredicateIndex
from infoguess.intersect import BITMAP, REPRESENTATIONS
from infoguess.predicates import Predicate
from infoguess.words import WORD_LENGTH, encode_words


class ScoringConfig(NamedTuple):
    representation: str = BITMAP
    precompute_pairs: bool = False
    workers: Optional[int] = None
    chunk_size: int = 64
    progress: bool = False


class ScoringContext:
    def __init__(self, words, codes, sets, packed, index, config):
        self.words = tuple(words)
        self.codes = codes
        self.letter_sets = sets
        self.positioned_words = packed
        self.index = index
        self.config = config
        self._ids = {}
        for word_id, word in enumerate(self.words):
            self._ids.setdefault(word, word_id)

    @classmethod
    def build(cls, words, config: Optional[ScoringConfig] = None) -> "ScoringContext":
        """
        Validate `words` and build everything scoring needs.

        Raises DecodeError on a malformed entry and EmptyDictionaryError on an
        empty dictionary; no partial context is ever returned.
        """
        config = config or ScoringConfig()
        if config.representation not in REPRESENTATIONS:
            raise ValueError(f"unknown representation: {config.representation!r}")

        words = list(words)
        if not words:
            raise EmptyDictionaryError("dictionary has no words")

        codes = encode_words(words, WORD_LENGTH)
        sets = letter_sets(codes)
        packed = positioned_words(codes)
        for array in (codes, sets, packed):
            array.setflags(write=False)

        index = PredicateIndex.build(
            sets,
            packed,
            representation=config.representation,
            precompute_pairs=config.precompute_pairs,
        )
        return cls(words, codes, sets, packed, index, config)

    @property
    def size(self) -> int:
        return len(self.words)

    def word_id(self, word: str) -> int:
        """WordId of the first occurrence of `word`."""
        try:
            return self._ids[word]
        except KeyError as exc:
            raise KeyError(f"word not found in dictionary: {word}") from exc

    def letter_set(self, word_id: int) -> LetterSet:
        return LetterSet(int(self.letter_sets[word_id]))

    def positioned_word(self, word_id: int) -> PositionedWord:
        return PositionedWord(int(self.positioned_words[word_id]))

    def matches(self, predicate: Predicate, word_id: int) -> bool:
        """Direct evaluation of `predicate` against one word, no index involved."""
        return predicate.matches(self.letter_set(word_id), self.positioned_word(word_id))
