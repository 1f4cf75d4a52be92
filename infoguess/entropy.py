"""
entropy.py

Expected information of a guess.

For a guess, every feedback pattern defines a bin: the dictionary words that
would produce it. With N words and a bin of b words the bin contributes
-b * log2(b / N), written as b * log2(N / b) so one full bin gives +0.0.
The sum over non-empty bins divided by N is the Shannon entropy of the
partition, in bits.

Scoring runs on two parallel axes:

1. All 3^L patterns of one candidate are intersected in a single vectorised
   AND-reduce (bitmap representation).
2. Candidates are spread over a process pool; each worker receives the
   read-only context once, through the pool initializer.
"""

import logging
import multiprocessing as mp
import os

import numpy as np
from tqdm import tqdm

from infoguess.errors import EmptyDictionaryError
from infoguess.intersect import BITMAP, count, count_rows, intersect, intersect_stacked
from infoguess.patterns import pattern_matrix
from infoguess.ranking import rank
from infoguess.words import encode_words


log = logging.getLogger(__name__)

_WORKER_STATE = {}


def entropy_from_counts(counts, total=None):
    """
    Compute Shannon entropy from bin sizes.

    `total` defaults to the sum of the counts; pass the dictionary size when
    the bins are known to partition it. Empty bins contribute nothing.
    """
    counts = np.asarray(counts, dtype=np.float64)
    total = float(counts.sum() if total is None else total)
    if total <= 0:
        raise EmptyDictionaryError("entropy is undefined over an empty dictionary")

    bins = counts[counts > 0]
    return float(np.sum(bins * np.log2(total / bins)) / total)


def bin_sizes(context, codes) -> np.ndarray:
    """Number of dictionary words left by each pattern of the word `codes`, in bin order."""
    index = context.index
    parts = index.part_matrix(pattern_matrix(codes))

    if index.representation == BITMAP:
        return count_rows(intersect_stacked(index.stacked(parts)))

    sizes = np.zeros(parts.shape[0], dtype=np.int64)
    for j, row in enumerate(parts):
        survivors = intersect([index.part(p) for p in row], index.representation)
        sizes[j] = count(survivors, index.representation)
    return sizes


def candidate_entropy(context, word_id: int) -> float:
    """Entropy of dictionary word `word_id` against the whole dictionary, as an f32 value."""
    sizes = bin_sizes(context, context.codes[word_id])
    return float(np.float32(entropy_from_counts(sizes, context.size)))


def word_entropy(context, word: str) -> float:
    """Entropy of any well-formed guess, whether or not it is in the dictionary."""
    codes = encode_words([word])[0]
    return float(np.float32(entropy_from_counts(bin_sizes(context, codes), context.size)))


def _init_worker(context):
    _WORKER_STATE["context"] = context


def _score_range(context, start, end):
    return np.array(
        [candidate_entropy(context, word_id) for word_id in range(start, end)],
        dtype=np.float32,
    )


def _worker_chunk(task):
    start, end = task
    return start, _score_range(_WORKER_STATE["context"], start, end)


def score_all(context) -> np.ndarray:
    """Entropy of every dictionary word, indexed by WordId."""
    config = context.config
    n_words = context.size
    worker_count = config.workers if config.workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, int(worker_count))
    chunk_size = max(1, int(config.chunk_size))

    entropies = np.zeros(n_words, dtype=np.float32)
    tasks = [
        (start, min(start + chunk_size, n_words)) for start in range(0, n_words, chunk_size)
    ]
    bar = tqdm(total=n_words, desc="Scoring", disable=not config.progress)

    if worker_count == 1:
        try:
            for start, end in tasks:
                entropies[start:end] = _score_range(context, start, end)
                bar.update(end - start)
        finally:
            bar.close()
        return entropies

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)
    log.debug(
        f"Scoring {n_words} words with {worker_count} worker(s) "
        f"({start_method}), chunk size {chunk_size}"
    )

    try:
        with ctx.Pool(
            processes=worker_count, initializer=_init_worker, initargs=(context,)
        ) as pool:
            for start, values in pool.imap_unordered(_worker_chunk, tasks, chunksize=1):
                entropies[start:start + values.size] = values
                bar.update(values.size)
    finally:
        bar.close()

    return entropies


def rank_dictionary(context):
    """Every dictionary word with its entropy, best first."""
    entropies = score_all(context)
    return rank(zip(context.words, (float(e) for e in entropies)))
