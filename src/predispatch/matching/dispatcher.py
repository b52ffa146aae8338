"""Dispatcher — handler vocabulary over a predicate trie."""

from collections.abc import Callable, Sequence
from typing import Any

from predispatch.matching.trie import Predicate, Trie

type Handler = Callable[..., Any]


class Dispatcher:
    """Maps predicate sequences to handlers.

    Thin wrapper over a ``Trie``: predicates key the paths, call
    arguments are the features, handlers are the stored values.
    Argument slicing to the generic function's arity happens upstream.
    """

    __slots__ = ("_trie",)

    def __init__(self) -> None:
        self._trie: Trie[Handler] = Trie()

    def get_handler(self, args: Sequence[Any]) -> Handler | None:
        """Return the handler whose predicates accept ``args``, or None."""
        return self._trie.get_value(args)

    def set_handler(self, predicates: Sequence[Predicate], handler: Handler) -> None:
        """Register ``handler`` under ``predicates``, replacing any previous one."""
        self._trie.set_value(predicates, handler)

    @property
    def handlers(self) -> list[Handler]:
        """Return all registered handlers, depth-first in edge insertion order."""
        return self._trie.values
