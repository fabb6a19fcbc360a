"""Interactive console front end: type one letter at a time, see suggestions.

Usage
-----
  dlb-autocomplete words.txt
  dlb-autocomplete words.txt.gz --compression gzip
  DLB_AUTOCOMPLETE_DICT=words.txt dlb-autocomplete --verbose
"""

import argparse
import logging
import os
import sys
from typing import Optional

from trie_errors import InvalidState
from prefix_cursor import PrefixCursor
from word_list import load_trie

log = logging.getLogger("dlb_autocomplete")

PROMPT = (
    "Enter one letter then press enter to get auto-complete suggestions "
    "(enter < to delete last character and . to stop) ..."
)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip() == "1"


def _read_line() -> Optional[str]:
    """Read one line of input, ``None`` on end of input."""
    try:
        return input()
    except EOFError:
        return None


def _confirm(question: str) -> Optional[bool]:
    print(question)
    answer = _read_line()
    if answer is None:
        return None
    return answer.strip().upper().startswith("Y")


def describe(cursor: PrefixCursor) -> str:
    """One-line summary of the suggestions for the cursor's prefix."""
    n = cursor.number_of_predictions()
    if n > 0:
        return f"{cursor.prefix} --> {cursor.retrieve_one_prediction()} ({n} predictions total)"
    return f"No predictions found for {cursor.prefix}"


def read_word(cursor: PrefixCursor) -> bool:
    """Feed keystrokes to *cursor* until the user types ``.``.

    Returns:
        ``False`` if input ran out before the word was finished.
    """
    print(PROMPT)
    while True:
        line = _read_line()
        if line is None:
            return False
        if not line:
            print(PROMPT)
            continue

        c = line[0]
        if c == ".":
            return True
        if c == "<":
            try:
                cursor.retreat()
            except InvalidState:
                print("Nothing to delete.")
                continue
        else:
            cursor.advance(c)
        print(describe(cursor))


def run_session(cursor: PrefixCursor) -> None:
    """Prompt for words until the user stops or input ends."""
    while True:
        if not read_word(cursor):
            break

        if cursor.prefix and not cursor.is_word():
            answer = _confirm(f"Do you want to add {cursor.prefix}? (y/n)")
            if answer is None:
                break
            if answer:
                cursor.add()
                log.info("Added %r to the dictionary", cursor.prefix)

        answer = _confirm("Do you want to continue? (y/n)")
        cursor.reset()
        if not answer:
            break


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Incremental-prefix autocomplete over a DLB trie",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        default=os.environ.get("DLB_AUTOCOMPLETE_DICT"),
        help="Path or URL of the word list (one word per line)",
    )
    parser.add_argument(
        "--compression",
        choices=["gzip"],
        default=None,
        help="Compression of the word list",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=_env_flag("DLB_AUTOCOMPLETE_VERBOSE"),
        help="Enable debug-level logging",
    )
    args = parser.parse_args(argv)

    if not args.dictionary:
        parser.error("a dictionary file is required (or set DLB_AUTOCOMPLETE_DICT)")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        trie = load_trie(args.dictionary, {"compression": args.compression})
    except (OSError, ValueError) as e:
        print(f"Error opening dictionary file {e}", file=sys.stderr)
        return 1

    print(f"Testing autocomplete ({len(trie):,} words):")
    run_session(PrefixCursor(trie))
    return 0


if __name__ == "__main__":
    sys.exit(main())
