"""
intersect.py

Set intersection over WordSets. A WordSet is stored one of two ways:

    ordered  sorted ascending int32 array of WordIds
    bitmap   packed uint8 bitset of length ceil(N / 8), bit i is WordId i

Both give the same answer as a set; which one is used is only a tuning choice.
"""

import numpy as np
from numba import njit


ORDERED = "ordered"
BITMAP = "bitmap"
REPRESENTATIONS = (BITMAP, ORDERED)

POPCOUNT = np.array([bin(i).count("1") for i in range(256)], dtype=np.uint8)


@njit(cache=True)
def _merge_intersect(a, b):
    out = np.empty(min(a.size, b.size), dtype=np.int32)
    i = 0
    j = 0
    n = 0

    while i < a.size and j < b.size:
        x = a[i]
        y = b[j]
        if x == y:
            out[n] = x
            n += 1
            i += 1
            j += 1
        elif x < y:
            i += 1
        else:
            j += 1

    return out[:n]


def intersect_ordered(sets) -> np.ndarray:
    """Lock-step merge, smallest set first so the running result stays small."""
    ordered = sorted(sets, key=len)
    result = np.array(ordered[0], dtype=np.int32)
    for other in ordered[1:]:
        if result.size == 0:
            break
        result = _merge_intersect(result, np.ascontiguousarray(other, dtype=np.int32))
    return result


def intersect_bitmaps(sets) -> np.ndarray:
    result = sets[0].copy()
    for other in sets[1:]:
        np.bitwise_and(result, other, out=result)
    return result


def intersect(sets, representation: str = ORDERED) -> np.ndarray:
    """
    Intersection of one or more WordSets of the same representation.

    A new WordSet is always returned; the inputs are never modified.
    """
    sets = list(sets)
    if not sets:
        raise ValueError("intersection of zero sets is undefined")
    if representation == BITMAP:
        return intersect_bitmaps(sets)
    if representation == ORDERED:
        return intersect_ordered(sets)
    raise ValueError(f"unknown representation: {representation!r}")


def count(word_set: np.ndarray, representation: str = ORDERED) -> int:
    """Number of WordIds in a WordSet."""
    if representation == BITMAP:
        return int(POPCOUNT[word_set].sum())
    return int(word_set.size)


def to_bitmap(ids, size: int) -> np.ndarray:
    mask = np.zeros(size, dtype=bool)
    mask[np.asarray(ids, dtype=np.int64)] = True
    return np.packbits(mask)


def to_ids(word_set: np.ndarray, size: int, representation: str = ORDERED) -> np.ndarray:
    """Any WordSet as a sorted int32 id array."""
    if representation == BITMAP:
        return np.flatnonzero(np.unpackbits(word_set, count=size)).astype(np.int32)
    return np.asarray(word_set, dtype=np.int32)


def intersect_stacked(stack: np.ndarray) -> np.ndarray:
    """AND-reduce a (P, k, nbytes) stack of bitmaps into P bitmaps."""
    return np.bitwise_and.reduce(stack, axis=1)


def count_rows(bitmaps: np.ndarray) -> np.ndarray:
    """Popcount of every row of a (P, nbytes) bitmap array."""
    return POPCOUNT[bitmaps].sum(axis=1, dtype=np.int64)
