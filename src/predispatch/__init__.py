"""Predispatch — generic functions dispatched by argument predicates.

Each argument is run through its own predicate; the handler whose whole
predicate tuple succeeds is called. Basic usage::

    from predispatch import create
    from predispatch.predicates import is_number, is_sequence

    add = create(name="add", length=2)
    add.when([is_number, is_number], lambda x, y: x + y)
    add.when([is_sequence, is_sequence], lambda xs, ys: [x + y for x, y in zip(xs, ys)])

    add(5, 6)            # 11
    add([7, 2], [3, 4])  # [10, 6]
"""

__version__ = "0.1.0"
__all__ = [
    "GenericConfig",
    "GenericFunction",
    "NoMatchingHandler",
    "PredispatchError",
    "RegistrationError",
    "create",
    "of",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import predispatch`` fast while providing a clean top-level API.
    """
    if name in ("GenericFunction", "create", "of"):
        from predispatch import generic as _generic

        return getattr(_generic, name)

    if name == "GenericConfig":
        from predispatch.config import GenericConfig

        return GenericConfig

    if name in ("NoMatchingHandler", "PredispatchError", "RegistrationError"):
        from predispatch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
