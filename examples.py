"""
Examples of using DLBTrie and PrefixCursor for autocomplete.
"""

import tempfile
from pathlib import Path

from dlb_trie import DLBTrie
from prefix_cursor import PrefixCursor
from word_list import load_trie


def example_basic_usage():
    """Build a trie and query prefixes."""
    print("=== Basic Usage ===")

    trie = DLBTrie(["cat", "car", "card", "care", "dog"])
    cursor = PrefixCursor(trie)

    for c in "ca":
        cursor.advance(c)

    print(f"Prefix: {cursor.prefix!r}")
    print(f"Predictions: {cursor.number_of_predictions()}")
    print(f"Best: {cursor.retrieve_one_prediction()}")
    print(f"All: {cursor.retrieve_all_predictions()}")
    print()


def example_typing():
    """Type a word letter by letter, backing up once."""
    print("=== Typing ===")

    trie = DLBTrie(["apple", "apply", "apricot", "banana"])
    cursor = PrefixCursor(trie)

    for c in "apx":
        found = cursor.advance(c)
        print(f"advance({c!r}) -> {found}, {cursor.number_of_predictions()} predictions")

    cursor.retreat()
    print(f"retreat() -> prefix {cursor.prefix!r}, "
          f"{cursor.number_of_predictions()} predictions")

    for c in "ply":
        cursor.advance(c)
    print(f"{cursor.prefix!r} is a word: {cursor.is_word()}")
    print()


def example_learning_new_words():
    """Commit the typed prefix as a new word, then delete one."""
    print("=== Adding and Deleting ===")

    trie = DLBTrie(["tea", "ten"])
    cursor = PrefixCursor(trie)

    for c in "tent":
        cursor.advance(c)
    print(f"{cursor.prefix!r} known: {cursor.is_word()}")
    cursor.add()
    cursor.reset()
    print(f"After add: {list(trie)}")

    trie.delete("ten")
    print(f"After delete('ten'): {list(trie)}")
    print(trie.dump())
    print()


def example_word_list():
    """Load a dictionary file."""
    print("=== Word List ===")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "words.txt"
        path.write_text("zebra\nzeal\nzero\nzone\n", encoding="utf-8")
        trie = load_trie(str(path))

    cursor = PrefixCursor(trie)
    cursor.advance("z")
    cursor.advance("e")
    print(f"{trie!r}: 'ze' -> {cursor.retrieve_all_predictions()}")
    print()


if __name__ == "__main__":
    example_basic_usage()
    example_typing()
    example_learning_new_words()
    example_word_list()

    print("All examples completed!")
