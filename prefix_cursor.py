"""Running-prefix cursor over a :class:`~dlb_trie.DLBTrie`."""

import logging
from typing import Optional

from dlb_trie import DLBTrie
from trie_errors import InvalidArgument, InvalidState

log = logging.getLogger("dlb_autocomplete")


class PrefixCursor:
    """Tracks a running prefix one character at a time.

    The cursor holds a node of the trie plus the literal text typed so far.
    ``advance`` moves one level down, ``retreat`` one level up, so prefix
    queries never re-walk from the root.

    When an advance finds no matching child the cursor becomes *stuck*:
    ``miss_offset`` goes to 1 and the position freezes.  Further advances
    while stuck only append to the literal prefix.  A retreat while stuck
    drops the last character and decrements the offset, so a single retreat
    unsticks the cursor at the node it held before the miss.

    If ``delete`` prunes the node the cursor sits on, the next operation
    re-walks the path letters from the root.  Letters whose nodes are gone
    count as misses, so retreating over them lands back in the live trie.

    Example::

        trie = DLBTrie(["car", "card", "cat"])
        cursor = PrefixCursor(trie)
        cursor.advance("c"); cursor.advance("a")
        cursor.number_of_predictions()      # 3
        cursor.retrieve_all_predictions()   # ['car', 'card', 'cat']
    """

    def __init__(self, trie: DLBTrie) -> None:
        self._trie = trie
        # (letter, node, generation) from the first level below the root
        # down to the current position.
        self._path: list[tuple[str, int, int]] = []
        self._prefix: list[str] = []
        self._miss_offset = 0

    # ------------------------------------------------------------------ #
    #  State                                                               #
    # ------------------------------------------------------------------ #

    @property
    def trie(self) -> DLBTrie:
        return self._trie

    @property
    def prefix(self) -> str:
        """Every character advanced so far, misses included."""
        return "".join(self._prefix)

    @property
    def miss_offset(self) -> int:
        self._sync()
        return self._miss_offset

    @property
    def position(self) -> Optional[int]:
        """Current node id, ``None`` while the trie has no root."""
        self._sync()
        if self._path:
            return self._path[-1][1]
        return self._trie.root

    @property
    def is_stuck(self) -> bool:
        return self.miss_offset > 0

    def _sync(self) -> None:
        """Re-resolve the path if ``delete`` pruned the current position.

        A live position implies a live path, since pruning only frees a node
        after everything below it.  So the common case is one comparison.
        """
        path = self._path
        if not path:
            return
        trie = self._trie
        _, node, generation = path[-1]
        if trie.generation(node) == generation:
            return

        parent = trie.root
        for depth, (letter, node, generation) in enumerate(path):
            if trie.generation(node) != generation:
                node = trie.find_child(parent, letter)
                if node is None:
                    lost = len(path) - depth
                    del path[depth:]
                    self._miss_offset += lost
                    log.debug("Cursor path pruned below depth %d, %d letter(s) now misses",
                              depth, lost)
                    return
                path[depth] = (letter, node, trie.generation(node))
            parent = node

    def _current(self) -> Optional[int]:
        """Node the prefix resolves to, or ``None`` if stuck/unpositioned."""
        if self._miss_offset > 0:
            return None
        self._sync()
        if self._miss_offset > 0:
            return None
        if self._path:
            return self._path[-1][1]
        return self._trie.root

    # ------------------------------------------------------------------ #
    #  Cursor protocol                                                     #
    # ------------------------------------------------------------------ #

    def advance(self, c: str) -> bool:
        """Append *c* to the running prefix.

        Returns:
            ``True`` if the cursor moved to a child labelled *c*.  Always
            ``False`` while stuck; the trie is not consulted then.

        Raises:
            InvalidArgument: If *c* is not a single character.
        """
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidArgument(f"expected a single character, got {c!r}")

        self._prefix.append(c)
        node = self._current()
        if node is None:
            if self._miss_offset == 0:
                # Nothing stored yet.
                self._miss_offset = 1
            return False

        child = self._trie.find_child(node, c)
        if child is None:
            self._miss_offset = 1
            return False
        self._path.append((c, child, self._trie.generation(child)))
        return True

    def retreat(self) -> None:
        """Remove the last character of the running prefix.

        Raises:
            InvalidState: If the running prefix is empty.
        """
        if not self._prefix:
            raise InvalidState("Running prefix is the empty string")

        self._prefix.pop()
        if self._miss_offset == 0:
            self._sync()
        if self._miss_offset > 0:
            self._miss_offset -= 1
        elif self._path:
            self._path.pop()

    def reset(self) -> None:
        """Return to the root with an empty prefix."""
        self._path = []
        self._miss_offset = 0
        self._prefix = []

    def is_word(self) -> bool:
        """True if the running prefix is a stored word."""
        node = self._current()
        return node is not None and self._trie.is_terminal(node)

    def add(self) -> bool:
        """Store the running prefix as a word.

        Returns:
            ``True`` if the prefix was not already a word.

        Raises:
            InvalidState: If nothing has been advanced yet.
        """
        if not self._prefix:
            raise InvalidState("No running prefix to add")
        return self._trie.add(self.prefix)

    # ------------------------------------------------------------------ #
    #  Predictions                                                         #
    # ------------------------------------------------------------------ #

    def number_of_predictions(self) -> int:
        """Number of stored words starting with the running prefix."""
        node = self._current()
        if node is None:
            return 0
        return self._trie.subtree_count(node)

    def retrieve_one_prediction(self) -> Optional[str]:
        """Return the lexicographically smallest completion, or ``None``."""
        node = self._current()
        if node is None:
            return None
        return self._trie.first_completion(node, self.prefix)

    def retrieve_all_predictions(self) -> Optional[list[str]]:
        """Return every completion in lexicographic order.

        ``None`` means the cursor has no position (stuck, or the trie has
        never held a word); an empty list means the position exists but no
        word lies under it.
        """
        node = self._current()
        if node is None:
            return None
        return list(self._trie.completions(node, self.prefix))

    def __repr__(self) -> str:
        offset = self.miss_offset
        state = f", stuck={offset}" if offset else ""
        return f"PrefixCursor(prefix={self.prefix!r}{state})"
