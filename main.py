"""
main.py

Ranks every word of a dictionary by the information it is expected to reveal
as a first guess.

Usage:
    python main.py data/dict.txt -top 10 -workers 8 -progress

Optional:
-representation bitmap|ordered: how predicate word sets are stored.
-pairs: cache intersections of adjacent-position predicate pairs.
-verbose: debug logging.
"""

import argparse
import logging
import time

from infoguess.context import ScoringConfig, ScoringContext
from infoguess.entropy import rank_dictionary
from infoguess.errors import InfoGuessError
from infoguess.intersect import REPRESENTATIONS
from infoguess.ranking import TOP_K, top_k
from infoguess.words import load_word_list


def parse_args():
    parser = argparse.ArgumentParser(
        description="Rank fixed-length guesses by expected information (bits)."
    )
    parser.add_argument("dictionary", help="Newline-separated word list.")
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_K,
        help=f"Number of words to show (default: {TOP_K}).",
    )
    parser.add_argument(
        "-representation",
        choices=REPRESENTATIONS,
        default="bitmap",
        help="WordSet storage for the predicate index (default: bitmap).",
    )
    parser.add_argument(
        "-pairs",
        action="store_true",
        help="Precompute adjacent predicate pair intersections.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=64,
        help="Number of candidate words per worker task.",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while scoring.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = ScoringConfig(
        representation=args.representation,
        precompute_pairs=args.pairs,
        workers=args.workers,
        chunk_size=args.chunk_size,
        progress=args.progress,
    )

    words = load_word_list(args.dictionary)
    try:
        context = ScoringContext.build(words, config)
    except InfoGuessError as exc:
        raise SystemExit(str(exc)) from exc

    start = time.time()
    results = rank_dictionary(context)

    print(f"\nTop {args.top} guesses over {context.size} words:")
    for word, bits in top_k(results, args.top):
        print(f"{word}: {bits:.4f} bits")
    print(f"Scored in {time.time() - start:.1f}s")


if __name__ == "__main__":
    main()
