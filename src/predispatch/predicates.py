"""Ready-made predicates for ``GenericFunction.when()``.

Predicates are keyed by identity, so reuse these module-level objects
(or bind a factory result to a name) to share trie prefixes. Each call
to ``instance_of()`` returns a new predicate.
"""

from collections.abc import Callable, Sequence
from numbers import Number
from typing import Any


def anything(value: Any) -> bool:
    """Accept every value. Useful as a catch-all position."""
    return True


def is_number(value: Any) -> bool:
    """Numbers, excluding ``bool``."""
    return isinstance(value, Number) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_sequence(value: Any) -> bool:
    """Sequences other than ``str``, ``bytes`` and ``bytearray``."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def instance_of(*types: type) -> Callable[[Any], bool]:
    """Build a predicate accepting instances of any of ``types``."""

    def predicate(value: Any) -> bool:
        return isinstance(value, types)

    predicate.__qualname__ = f"instance_of({', '.join(t.__name__ for t in types)})"
    return predicate
