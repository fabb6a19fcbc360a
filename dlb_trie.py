"""De la Briandais (DLB) trie with per-node subtree word counts."""

import array
import logging
from typing import Iterable, Iterator, NamedTuple, Optional

from bitarray import bitarray

from trie_errors import InvalidArgument

log = logging.getLogger("dlb_autocomplete")

NIL = -1  # link sentinel: no child / sibling / parent
ROOT_LETTER = "\0"


class Node(NamedTuple):
    """Read-only snapshot of one trie node.

    Links are node ids, or ``None`` where the arena holds ``NIL``.
    """

    id: int
    letter: str
    is_terminal: bool
    subtree_count: int
    child: Optional[int]
    next_sibling: Optional[int]
    prev_sibling: Optional[int]
    parent: Optional[int]


def _link(value: int) -> Optional[int]:
    return None if value == NIL else value


class DLBTrie:
    """Mutable DLB trie stored as an arena of parallel arrays.

    Every node is an integer id into the columns below.  A node has one
    ``child`` link to the first node of its sibling list; siblings form a
    doubly-linked list kept in ascending letter order, and every node keeps a
    back link to its parent.  ``subtree_count`` of a node is the number of
    terminal nodes in its subtree, itself included, so prefix counts are a
    single array read.

    Nodes whose subtree holds no word are pruned as soon as ``delete`` empties
    them; their slots go on a free list and are reused by later inserts.
    """

    # ------------------------------------------------------------------ #
    #  Construction                                                        #
    # ------------------------------------------------------------------ #

    def __init__(self, words: Iterable[str] = ()) -> None:
        """Create a trie, optionally seeded with *words*.

        Args:
            words: Iterable of non-empty strings. Duplicates are ignored.
        """
        self._letters: list[Optional[str]] = []
        self._terminal = bitarray()
        self._counts = array.array("Q")
        self._child = array.array("q")
        self._next = array.array("q")
        self._prev = array.array("q")
        self._parent = array.array("q")
        self._generation = array.array("Q")
        self._free: list[int] = []
        self._root: Optional[int] = None
        self.update(words)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "DLBTrie":
        """Build a trie holding every word in *words*."""
        return cls(words)

    def _new_node(self, letter: str) -> int:
        """Allocate a detached node, reusing a freed slot when one exists."""
        if self._free:
            node = self._free.pop()
            self._letters[node] = letter
            self._terminal[node] = False
            self._counts[node] = 0
            self._child[node] = NIL
            self._next[node] = NIL
            self._prev[node] = NIL
            self._parent[node] = NIL
            return node
        self._letters.append(letter)
        self._terminal.append(False)
        self._counts.append(0)
        self._child.append(NIL)
        self._next.append(NIL)
        self._prev.append(NIL)
        self._parent.append(NIL)
        self._generation.append(0)
        return len(self._letters) - 1

    def _free_node(self, node: int) -> None:
        # Bumped on free so ids held elsewhere can tell a reused slot apart.
        self._generation[node] += 1
        self._letters[node] = None
        self._terminal[node] = False
        self._child[node] = NIL
        self._next[node] = NIL
        self._prev[node] = NIL
        self._parent[node] = NIL
        self._free.append(node)

    # ------------------------------------------------------------------ #
    #  Structural primitives                                               #
    # ------------------------------------------------------------------ #

    def find_child(self, node: Optional[int], letter: str) -> Optional[int]:
        """Return the child of *node* labelled *letter*, or ``None``.

        Scans the sibling list under ``node.child``.  Siblings are sorted, so
        the scan stops at the first letter past the target.
        """
        if node is None:
            return None
        letters = self._letters
        child = self._child[node]
        while child != NIL:
            found = letters[child]
            if found == letter:
                return child
            if found > letter:
                break
            child = self._next[child]
        return None

    def add_child(self, node: int, new_child: int) -> None:
        """Link the detached node *new_child* under *node*.

        The child is spliced into the sibling list at its sorted position.

        Raises:
            InvalidArgument: If *node* already has a child with that letter.
        """
        letters = self._letters
        letter = letters[new_child]
        prev = NIL
        cur = self._child[node]
        while cur != NIL and letters[cur] < letter:
            prev = cur
            cur = self._next[cur]
        if cur != NIL and letters[cur] == letter:
            raise InvalidArgument(f"node {node} already has a child {letter!r}")

        self._parent[new_child] = node
        self._prev[new_child] = prev
        self._next[new_child] = cur
        if prev == NIL:
            self._child[node] = new_child
        else:
            self._next[prev] = new_child
        if cur != NIL:
            self._prev[cur] = new_child

    def _remove_node(self, node: int) -> None:
        """Splice *node* out of its parent's sibling list and free it."""
        parent = self._parent[node]
        nxt = self._next[node]
        prev = self._prev[node]
        if parent != NIL and self._child[parent] == node:
            self._child[parent] = nxt
        if prev != NIL:
            self._next[prev] = nxt
        if nxt != NIL:
            self._prev[nxt] = prev
        self._free_node(node)

    # ------------------------------------------------------------------ #
    #  Mutation                                                            #
    # ------------------------------------------------------------------ #

    def add(self, word: str) -> bool:
        """Insert *word*.

        Args:
            word: Non-empty string.

        Returns:
            ``True`` if the word was newly added, ``False`` if it was already
            stored (nothing changes in that case).

        Raises:
            InvalidArgument: If *word* is ``None``, empty or not a string.
        """
        if not isinstance(word, str) or not word:
            raise InvalidArgument("word null or empty")

        if self._root is None:
            self._root = self._new_node(ROOT_LETTER)
            log.debug("Created trie root")

        node = self._root
        for letter in word:
            child = self.find_child(node, letter)
            if child is None:
                child = self._new_node(letter)
                self.add_child(node, child)
            node = child

        if self._terminal[node]:
            return False
        self._terminal[node] = True

        counts = self._counts
        parent = self._parent
        while node != NIL:
            counts[node] += 1
            node = parent[node]
        return True

    def update(self, words: Iterable[str]) -> int:
        """Add every word in *words* and return how many were new."""
        added = 0
        for word in words:
            if self.add(word):
                added += 1
        return added

    def delete(self, word: str) -> bool:
        """Remove *word*, pruning nodes that no longer lead to any word.

        Returns:
            ``True`` if the word was stored and has been removed.  ``False``
            for ``None``/empty/non-string input, an empty trie, or an absent
            word.
        """
        if not isinstance(word, str) or not word or self._root is None:
            return False

        path: list[int] = []
        node: Optional[int] = self._root
        for letter in word:
            node = self.find_child(node, letter)
            if node is None:
                return False
            path.append(node)

        if not self._terminal[node]:
            return False
        self._terminal[node] = False

        # Walk back up: prune emptied nodes until the first one still in use,
        # then only decrement counts above it.
        counts = self._counts
        pruned = 0
        pruning = True
        for node in reversed(path):
            counts[node] -= 1
            if pruning and counts[node] == 0 and not self._terminal[node]:
                self._remove_node(node)
                pruned += 1
            else:
                pruning = False
        counts[self._root] -= 1

        if pruned:
            log.debug("Deleted %r, pruned %d node(s)", word, pruned)
        return True

    # ------------------------------------------------------------------ #
    #  Node access                                                         #
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> Optional[int]:
        """Id of the root node, ``None`` until the first word is added."""
        return self._root

    @property
    def node_count(self) -> int:
        """Number of live nodes, root included."""
        return len(self._letters) - len(self._free)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._letters) or self._letters[node] is None:
            raise IndexError(f"No live node with id {node}")

    def node(self, node: int) -> Node:
        """Return a read-only :class:`Node` view of *node*.

        Raises:
            IndexError: If *node* is out of range or has been freed.
        """
        self._check(node)
        return Node(
            id=node,
            letter=self._letters[node],
            is_terminal=bool(self._terminal[node]),
            subtree_count=self._counts[node],
            child=_link(self._child[node]),
            next_sibling=_link(self._next[node]),
            prev_sibling=_link(self._prev[node]),
            parent=_link(self._parent[node]),
        )

    def letter(self, node: int) -> str:
        return self._letters[node]

    def is_terminal(self, node: int) -> bool:
        return bool(self._terminal[node])

    def subtree_count(self, node: int) -> int:
        return self._counts[node]

    def parent(self, node: int) -> Optional[int]:
        return _link(self._parent[node])

    def generation(self, node: int) -> int:
        """How many times the slot *node* has been freed.

        A node id paired with its generation names one node for good: once
        ``delete`` prunes the node, the pair no longer matches, even after
        ``add`` reuses the slot.
        """
        return self._generation[node]

    def children(self, node: int) -> Iterator[int]:
        """Yield the children of *node* in ascending letter order."""
        child = self._child[node]
        while child != NIL:
            yield child
            child = self._next[child]

    def walk(self, word: str) -> Optional[int]:
        """Return the node reached by spelling *word* from the root."""
        node = self._root
        for letter in word:
            node = self.find_child(node, letter)
            if node is None:
                return None
        return node

    # ------------------------------------------------------------------ #
    #  Traversal                                                           #
    # ------------------------------------------------------------------ #

    def completions(self, node: int, prefix: str = "") -> Iterator[str]:
        """Yield every word in the subtree of *node*, in lexicographic order.

        Args:
            node: Node the traversal starts from.
            prefix: Text spelled by the path from the root to *node*.

        Depth-first, children before siblings.  Sibling lists are sorted, so
        the output is ordered without a separate sort.
        """
        letters = self._letters
        terminal = self._terminal
        if terminal[node]:
            yield prefix

        stack: list[tuple[int, str]] = []
        for child in reversed(list(self.children(node))):
            stack.append((child, prefix + letters[child]))

        while stack:
            node, text = stack.pop()
            if terminal[node]:
                yield text
            for child in reversed(list(self.children(node))):
                stack.append((child, text + letters[child]))

    def first_completion(self, node: int, prefix: str = "") -> Optional[str]:
        """Return the smallest word in the subtree of *node*, or ``None``.

        Follows first children down to the nearest terminal.  Every non-root
        node leads to at least one word, so the descent never dead-ends.
        """
        if self._counts[node] == 0:
            return None
        parts = [prefix]
        while not self._terminal[node]:
            node = self._child[node]
            parts.append(self._letters[node])
        return "".join(parts)

    def dump(self) -> str:
        """Render the trie as indented text for debugging.

        Each line shows a letter, ``*`` if a word ends there, and the subtree
        count in parentheses.  Siblings share an indent; children are one
        space deeper.
        """
        lines = ["==================== START: DLB Trie ===================="]
        if self._root is not None:
            stack: list[tuple[int, int]] = [(self._root, 0)]
            while stack:
                node, depth = stack.pop()
                label = "ROOT" if node == self._root else self._letters[node]
                star = " *" if self._terminal[node] else ""
                lines.append(f"{' ' * depth}{label}{star} ({self._counts[node]})")
                for child in reversed(list(self.children(node))):
                    stack.append((child, depth + 1))
        lines.append("==================== END: DLB Trie ====================")
        return "\n".join(lines)

    # ------------------------------------------------------------------ #
    #  Dunder methods                                                      #
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        """Return the number of stored words."""
        if self._root is None:
            return 0
        return self._counts[self._root]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self.walk(word)
        return node is not None and bool(self._terminal[node])

    def __iter__(self) -> Iterator[str]:
        """Iterate over all stored words in lexicographic order."""
        if self._root is None:
            return iter(())
        return self.completions(self._root)

    def __repr__(self) -> str:
        return f"DLBTrie({len(self)} words)"
