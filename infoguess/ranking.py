"""
ranking.py

Orders (word, entropy) results, best first. Ties keep their input order.
"""

TOP_K = 20


def rank(results):
    """Sort (word, entropy) pairs by descending entropy; the sort is stable."""
    return sorted(results, key=lambda item: item[1], reverse=True)


def top_k(results, k: int = TOP_K):
    """The first `k` results of an already ranked list."""
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return list(results[:k])
