"""Predicate trie — ordered, identity-keyed prefix sharing.

Handlers are stored at the end of a path of predicates. Lookup walks
the path by testing each predicate against the matching feature.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

type Predicate = Callable[[Any], object]


class _TrieNode[V]:
    """A node in the predicate trie. Holds a value only at path ends."""

    __slots__ = ("edges", "has_value", "value")

    def __init__(self) -> None:
        self.value: V | None = None
        # A stored None is still a stored value
        self.has_value = False
        # Outgoing edges in insertion order; the last one wins ties
        self.edges: list[_Edge[V]] = []


@dataclass(slots=True)
class _Edge[V]:
    """A predicate-guarded edge in the trie."""

    predicate: Predicate
    node: _TrieNode[V]


class Trie[V]:
    """Stores values under sequences of predicates.

    Usage::

        trie = Trie()
        trie.set_value([is_number, is_number], add)
        trie.get_value([5, 6])       # -> add
        trie.get_value(["a", "b"])   # -> None

    Predicates are compared by identity, never by equality. Two
    predicates accepting the same feature at one node both stay
    registered; the one added last is tried first.

    Not thread-safe: serialize ``set_value`` against everything else.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: _TrieNode[V] = _TrieNode()

    def set_value(self, predicates: Sequence[Predicate], value: V) -> None:
        """Associate ``value`` with a sequence of predicates.

        Existing prefixes are reused. Setting the same sequence twice
        overwrites the earlier value. An empty sequence stores on the root.
        """
        node = self._root
        for predicate in predicates:
            node = _add_edge(node, predicate)
        node.value = value
        node.has_value = True

    def get_value(self, features: Sequence[Any]) -> V | None:
        """Return the value whose predicates accept every feature, or None.

        Each feature is tested against the edges of the current node,
        most recent first. The walk stops with ``None`` as soon as no
        edge accepts a feature, including features past the end of
        every registered path.
        """
        node = self._root
        for feature in features:
            edge = _find_traversable_edge(node, feature)
            if edge is None:
                return None
            node = edge.node
        return node.value

    @property
    def values(self) -> list[V]:
        """Return every stored value, depth-first in insertion order.

        A value stored under several paths is listed once.
        """
        seen: set[int] = set()
        result: list[V] = []
        for node in _walk(self._root):
            if not node.has_value:
                continue
            value_id = id(node.value)
            if value_id not in seen:
                seen.add(value_id)
                result.append(node.value)  # type: ignore[arg-type]
        return result

    def __len__(self) -> int:
        return sum(1 for node in _walk(self._root) if node.has_value)


def _add_edge[V](parent: _TrieNode[V], predicate: Predicate) -> _TrieNode[V]:
    """Return the child reached through ``predicate``, creating it if needed."""
    for edge in parent.edges:
        if edge.predicate is predicate:
            return edge.node
    child: _TrieNode[V] = _TrieNode()
    parent.edges.append(_Edge(predicate=predicate, node=child))
    return child


def _find_traversable_edge[V](node: _TrieNode[V], feature: Any) -> _Edge[V] | None:
    """Return the most recently added edge whose predicate accepts ``feature``."""
    for edge in reversed(node.edges):
        if edge.predicate(feature):
            return edge
    return None


def _walk[V](node: _TrieNode[V]) -> Iterator[_TrieNode[V]]:
    yield node
    for edge in node.edges:
        yield from _walk(edge.node)
