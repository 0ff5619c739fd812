"""
Trie (Prefix Tree) — one character per edge, integer values.

Techniques used:
  - Iterative traversal: every operation walks with a loop or an explicit
    stack, so the call stack stays constant regardless of key length.
  - Two-level lookup: `find` reports whether a *path* exists; the returned
    view's `value` reports whether a *key* was stored there.
  - No pruning: `delete` only clears the value, the nodes on the path stay.

Complexity (n = key length, N = number of nodes):
  add_string / find / delete  — O(n)
  length / iter                — O(N)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

logger = logging.getLogger(__name__)


@dataclass
class TrieNode:
    """Internal node of the trie."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    value: int | None = None


class NodeView:
    """Read-only handle on a node returned by `Trie.find`."""

    __slots__ = ("_node",)

    def __init__(self, node: TrieNode) -> None:
        self._node = node

    @property
    def value(self) -> int | None:
        return self._node.value

    @property
    def has_value(self) -> bool:
        return self._node.value is not None

    @property
    def children(self) -> Mapping[str, NodeView]:
        return MappingProxyType(
            {ch: NodeView(child) for ch, child in self._node.children.items()}
        )

    def get(self, symbol: str) -> NodeView | None:
        child = self._node.children.get(symbol)
        return NodeView(child) if child is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeView):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"NodeView(value={self.value!r}, children={list(self._node.children)!r})"


class Trie:
    """A prefix tree mapping string keys to integers.

    >>> t = Trie()
    >>> t.add_string("B", 1)
    >>> t.add_string("Bar", 2)
    >>> t.length()
    2
    >>> t.find("Ba").value is None
    True
    >>> t.find("Baz") is None
    True
    >>> t.delete("B")
    1
    >>> len(t)
    1
    """

    def __init__(self) -> None:
        self.root = TrieNode()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_string(self, key: str, value: int) -> None:
        """Store *value* under *key*, overwriting any previous value."""
        node = self.root
        for char in key:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        if node.value is not None:
            logger.debug("Overwriting key=%r (%r -> %r)", key, node.value, value)
        node.value = value

    def find(self, key: str) -> NodeView | None:
        """Return a view of the node at the end of *key*'s path, or ``None``.

        The path may exist without a value; check ``view.value`` for that.
        """
        node = self._find_node(key)
        if node is None:
            return None
        return NodeView(node)

    def delete(self, key: str) -> int | None:
        """Clear the value stored under *key* and return it.

        Returns ``None`` if the path is missing or holds no value. Nodes are
        never removed, so ``find(key)`` keeps succeeding afterwards.
        """
        node = self._find_node(key)
        if node is None:
            logger.debug("Delete of missing path key=%r", key)
            return None
        previous, node.value = node.value, None
        return previous

    def length(self) -> int:
        """Number of nodes, root included, that hold a value."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.value is not None:
                count += 1
            stack.extend(node.children.values())
        return count

    def iter(self) -> list[tuple[str, int | None]]:
        """Return ``(edge symbol, value)`` for every node except the root.

        Pre-order: each child's pair comes before its subtree, siblings in
        the order their symbols were first inserted. Only the single edge
        symbol is reported, not the full key.
        """
        out: list[tuple[str, int | None]] = []
        # DFS with explicit stack: (symbol, node)
        stack = list(reversed(self.root.children.items()))
        while stack:
            char, node = stack.pop()
            out.append((char, node.value))
            stack.extend(reversed(node.children.items()))
        return out

    def dump(self) -> str:
        """Indented debug representation of the whole tree."""
        lines = [f"Trie(root value={self.root.value!r})"]
        stack: list[tuple[int, str, TrieNode]] = [
            (1, ch, child) for ch, child in reversed(self.root.children.items())
        ]
        while stack:
            depth, char, node = stack.pop()
            lines.append(f"{'    ' * depth}{char!r}: value={node.value!r}")
            stack.extend(
                (depth + 1, ch, child) for ch, child in reversed(node.children.items())
            )
        return "\n".join(lines)

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, key: str) -> bool:
        node = self._find_node(key)
        return node is not None and node.value is not None

    def __iter__(self) -> Iterator[tuple[str, int | None]]:
        return iter(self.iter())

    def __repr__(self) -> str:
        return self.dump()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find_node(self, key: str) -> TrieNode | None:
        """Walk the trie following *key*; return the landing node or None."""
        node = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node


# ------------------------------------------------------------------
# Quick demo
# ------------------------------------------------------------------

if __name__ == "__main__":
    trie = Trie()
    trie.add_string("B", 1)
    trie.add_string("Bar", 2)
    print(trie.dump())
