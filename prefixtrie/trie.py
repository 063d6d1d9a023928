"""Prefix trie mapping strings to optional values."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Mapping, TypeVar

from prefixtrie.constants import ROOT_CHAR

V = TypeVar("V")


class Trie(Generic[V]):
    """A trie node, and the sub-trie rooted at it.

    The root carries ``ROOT_CHAR`` and spells the empty string.  Every other
    node carries a single character and is stored in its parent's
    ``children`` under that character.  A node is ``terminal`` when the
    string spelled from the root down to it was inserted; ``value`` only
    means something on terminal nodes.

    The parent link is only used to rebuild path strings.  The root owns
    the whole tree through ``children``.  A node is truthy even when its
    sub-trie holds no strings.
    """

    __slots__ = ("char", "children", "parent", "terminal", "value")

    def __init__(self, parent: Trie[V] | None = None, char: str = ROOT_CHAR):
        self.char = char
        self.children: dict[str, Trie[V]] = {}
        self.parent: Trie[V] | None = parent
        self.terminal: bool = False
        self.value: V | None = None

    # ── Construction ────────────────────────────────────────────────────

    @classmethod
    def from_entries(cls, entries: Mapping[str, V]) -> Trie[V]:
        """Build a trie holding every ``string -> value`` pair."""
        root: Trie[V] = cls()
        for s, value in entries.items():
            root.insert(s, value)
        return root

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> Trie[V]:
        """Build a trie holding every string, with no values."""
        root: Trie[V] = cls()
        for s in strings:
            root.insert(s)
        return root

    # ── Node properties ─────────────────────────────────────────────────

    @property
    def is_root(self) -> bool:
        return self.char == ROOT_CHAR

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    # ── Mutation ────────────────────────────────────────────────────────

    def insert(self, s: str, value: V | None = None) -> None:
        """Insert ``s`` below this node, overwriting any previous value.

        O(m) where m is ``len(s)``.
        """
        node = self
        matched = 0
        # Follow existing nodes as far as they go.
        for ch in s:
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            matched += 1

        # Create the rest of the path.
        for ch in s[matched:]:
            child = Trie(node, ch)
            node.children[ch] = child
            node = child

        node.terminal = True
        node.value = value

    # ── Queries ─────────────────────────────────────────────────────────

    def find_node(self, s: str) -> Trie[V] | None:
        """Return the node reached by following ``s``, terminal or not.

        Returns ``None`` when the path does not exist.
        """
        node = self
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def find(self, s: str) -> tuple[V | None, bool]:
        """Return ``(value, True)`` if ``s`` was inserted, else ``(None, False)``."""
        node = self.find_node(s)
        if node is None or not node.terminal:
            return None, False
        return node.value, True

    def get(self, s: str, default: V | None = None) -> V | None:
        value, found = self.find(s)
        return value if found else default

    def is_prefix(self, s: str) -> bool:
        return self.find_node(s) is not None

    def find_suffixes(self, prefix: str) -> list[str]:
        """Return every inserted string starting with ``prefix``.

        The strings are spelled from the overall root, so ``prefix`` is
        included.  Order is unspecified.
        """
        node = self.find_node(prefix)
        if node is None:
            return []
        return [s for s, _ in node.iter_entries()]

    def path_string(self) -> str:
        """Return the string spelled from the root down to this node."""
        chars: list[str] = []
        node: Trie[V] | None = self
        while node is not None and not node.is_root:
            chars.append(node.char)
            node = node.parent
        return "".join(reversed(chars))

    # ── Traversal ───────────────────────────────────────────────────────

    def iter_nodes(self) -> Iterator[Trie[V]]:
        """Yield this node and all descendants in preorder.

        Siblings come out in child insertion order.
        """
        stack: list[Trie[V]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def iter_entries(self) -> Iterator[tuple[str, V | None]]:
        for node in self.iter_nodes():
            if node.terminal:
                yield node.path_string(), node.value

    def walk(self, fn: Callable[[Trie[V]], object]) -> None:
        """Call ``fn`` on every node of this sub-trie, parents before children."""
        for node in self.iter_nodes():
            fn(node)

    def to_entries(self) -> dict[str, V | None]:
        """Return every inserted ``string -> value`` pair in this sub-trie.

        O(n) where n is the number of nodes.
        """
        return dict(self.iter_entries())

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    # ── Dunder helpers ──────────────────────────────────────────────────

    def __contains__(self, s: object) -> bool:
        if not isinstance(s, str):
            return False
        return self.find(s)[1]

    def __len__(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.terminal)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.path_string()

    def __repr__(self) -> str:
        mark = " terminal" if self.terminal else ""
        return f"<Trie {self.path_string()!r}{mark} children={len(self.children)}>"
