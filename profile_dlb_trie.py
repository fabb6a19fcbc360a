"""Profile DLBTrie construction and cursor-driven prediction queries.

Usage
-----
  python profile_dlb_trie.py                      # 50000 synthetic words
  python profile_dlb_trie.py --words 200000
  python profile_dlb_trie.py --dict /usr/share/dict/words
"""

import argparse
import cProfile
import pstats
import random
import string
from typing import Optional

from dlb_trie import DLBTrie
from prefix_cursor import PrefixCursor
from word_list import load_words


def synthetic_words(count: int, seed: int = 0) -> list[str]:
    """Return *count* random lowercase words of length 2..12."""
    rng = random.Random(seed)
    letters = string.ascii_lowercase
    return ["".join(rng.choices(letters, k=rng.randint(2, 12))) for _ in range(count)]


def build_trie(words: list[str]) -> DLBTrie:
    print(f"Building DLBTrie from {len(words):,} words...")
    trie = DLBTrie(words)
    print(f"Trie built: {len(trie):,} words, {trie.node_count:,} nodes")
    return trie


def type_words(trie: DLBTrie, words: list[str]) -> int:
    """Type every word with one cursor, querying predictions after each key."""
    cursor = PrefixCursor(trie)
    total = 0
    for word in words:
        cursor.reset()
        for c in word:
            cursor.advance(c)
            total += cursor.number_of_predictions()
            cursor.retrieve_one_prediction()
        while cursor.prefix:
            cursor.retreat()
    return total


def print_stats(profiler: cProfile.Profile, title: str) -> None:
    stats = pstats.Stats(profiler)
    stats.strip_dirs()

    print("\n" + "=" * 80)
    print(f"{title} (sorted by cumulative time)")
    print("=" * 80 + "\n")
    stats.sort_stats("cumulative")
    stats.print_stats(25)

    print("\n" + "=" * 80)
    print(f"{title} (sorted by total time)")
    print("=" * 80 + "\n")
    stats.sort_stats("tottime")
    stats.print_stats(25)


def profile(words: list[str], queries: Optional[int] = None) -> DLBTrie:
    profiler = cProfile.Profile()
    profiler.enable()
    trie = build_trie(words)
    profiler.disable()
    print_stats(profiler, "BUILD")

    sample = words[:queries] if queries else words
    profiler = cProfile.Profile()
    profiler.enable()
    type_words(trie, sample)
    profiler.disable()
    print_stats(profiler, f"TYPING {len(sample):,} WORDS")
    return trie


def main():
    parser = argparse.ArgumentParser(
        description="Profile DLBTrie build and prefix queries",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--words", type=int, default=50000,
                        help="Number of synthetic words")
    parser.add_argument("--dict", type=str, default=None,
                        help="Word list to profile instead of synthetic words")
    parser.add_argument("--queries", type=int, default=5000,
                        help="Number of words to type through the cursor")
    args = parser.parse_args()

    if args.dict:
        words = list(load_words(args.dict))
    else:
        words = synthetic_words(args.words)
    profile(words, args.queries)


if __name__ == "__main__":
    main()
