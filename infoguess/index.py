"""
index.py

PredicateIndex: for every predicate, the WordSet of dictionary words that
satisfy it. Built once over the whole dictionary and read-only afterwards, so
it can be shared by every scoring task without locking.

With precompute_pairs the index also caches the intersection of each pair of
predicates sitting on adjacent positions (0, 1), (2, 3), ... which is exactly
how a pattern is split when it is scored. A 5-letter pattern then needs two
pair lookups plus one single lookup instead of five.
"""

import logging
import time

import numpy as np

from infoguess.errors import EmptyDictionaryError
from infoguess.intersect import BITMAP, ORDERED, REPRESENTATIONS, intersect, to_ids
from infoguess.predicates import PREDICATE_COUNT, Predicate, all_predicates
from infoguess.words import WORD_LENGTH


log = logging.getLogger(__name__)


class PredicateIndex:
    """
    Part ids 0..PREDICATE_COUNT-1 are the single predicate sets (part id ==
    predicate index). Cached pairs, if any, follow at PREDICATE_COUNT and up;
    `pair_slot[p, q]` gives their part id, or -1 if the pair is not cached.
    """

    def __init__(self, parts, representation: str, size: int, pair_slot=None):
        self.representation = representation
        self.size = size
        self._parts = parts
        self._pair_slot = pair_slot

    @classmethod
    def build(
        cls,
        letter_sets: np.ndarray,
        positioned: np.ndarray,
        representation: str = BITMAP,
        precompute_pairs: bool = False,
    ) -> "PredicateIndex":
        if representation not in REPRESENTATIONS:
            raise ValueError(f"unknown representation: {representation!r}")

        size = int(letter_sets.shape[0])
        if size == 0:
            raise EmptyDictionaryError("cannot build a predicate index over zero words")

        start = time.time()
        predicates = all_predicates()
        masks = np.stack([p.mask(letter_sets, positioned) for p in predicates])

        if representation == BITMAP:
            parts = np.packbits(masks, axis=1)
        else:
            parts = [np.flatnonzero(m).astype(np.int32) for m in masks]

        log.info(
            f"Built {PREDICATE_COUNT} predicate sets over {size} words "
            f"({representation}) in {time.time() - start:.3f}s"
        )

        pair_slot = None
        if precompute_pairs:
            parts, pair_slot = _add_adjacent_pairs(parts, predicates, representation)

        if representation == BITMAP:
            parts.setflags(write=False)
        else:
            for part in parts:
                part.setflags(write=False)
        if pair_slot is not None:
            pair_slot.setflags(write=False)

        return cls(parts, representation, size, pair_slot)

    @property
    def has_pairs(self) -> bool:
        return self._pair_slot is not None

    def lookup(self, predicate: Predicate) -> np.ndarray:
        """Read-only WordSet of the words matching `predicate`."""
        return self._parts[predicate.index()]

    def lookup_index(self, index: int) -> np.ndarray:
        return self.lookup(Predicate.from_index(index))

    def word_ids(self, predicate: Predicate) -> np.ndarray:
        """Matching WordIds as a sorted array, whatever the representation."""
        return to_ids(self.lookup(predicate), self.size, self.representation)

    def pair(self, p: Predicate, q: Predicate) -> np.ndarray:
        """Intersection of two predicate sets, from the cache when it holds the pair."""
        i, j = p.index(), q.index()
        if self._pair_slot is not None:
            slot = max(self._pair_slot[i, j], self._pair_slot[j, i])
            if slot >= 0:
                return self._parts[slot]
        return intersect([self._parts[i], self._parts[j]], self.representation)

    def part(self, part_id: int) -> np.ndarray:
        return self._parts[part_id]

    def part_matrix(self, pattern_matrix: np.ndarray) -> np.ndarray:
        """
        Rewrite a (P, L) matrix of predicate indices, one pattern per row in
        position order, as a (P, k) matrix of part ids to intersect.
        """
        if self._pair_slot is None:
            return pattern_matrix

        length = pattern_matrix.shape[1]
        columns = [
            self._pair_slot[pattern_matrix[:, pos], pattern_matrix[:, pos + 1]]
            for pos in range(0, length - 1, 2)
        ]
        if length % 2:
            columns.append(pattern_matrix[:, length - 1])
        return np.stack(columns, axis=1)

    def stacked(self, part_matrix: np.ndarray) -> np.ndarray:
        """Bitmaps of a (P, k) part matrix as one (P, k, nbytes) array."""
        if self.representation != BITMAP:
            raise ValueError("stacked() needs the bitmap representation")
        return self._parts[part_matrix]


def _add_adjacent_pairs(parts, predicates, representation):
    start = time.time()
    by_position = [
        [p.index() for p in predicates if p.position == pos] for pos in range(WORD_LENGTH)
    ]
    pair_slot = np.full((PREDICATE_COUNT, PREDICATE_COUNT), -1, dtype=np.int32)
    next_slot = PREDICATE_COUNT
    extra = []

    for pos in range(0, WORD_LENGTH - 1, 2):
        left = np.array(by_position[pos])
        right = np.array(by_position[pos + 1])

        slots = next_slot + np.arange(left.size * right.size, dtype=np.int32)
        pair_slot[left[:, None], right[None, :]] = slots.reshape(left.size, right.size)
        next_slot += slots.size

        if representation == BITMAP:
            block = parts[left][:, None, :] & parts[right][None, :, :]
            extra.append(block.reshape(-1, parts.shape[1]))
        else:
            extra.extend(
                intersect([parts[i], parts[j]], ORDERED) for i in left for j in right
            )

    if representation == BITMAP:
        parts = np.concatenate([parts] + extra, axis=0)
    else:
        parts = parts + extra

    log.info(
        f"Cached {next_slot - PREDICATE_COUNT} adjacent predicate pairs "
        f"in {time.time() - start:.3f}s"
    )
    return parts, pair_slot
