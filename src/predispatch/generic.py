"""Generic functions — callables that pick a handler by predicate.

A generic function has a fixed arity. Each call tests its first
``length`` positional arguments against the registered predicate
sequences and runs the matching handler with the full argument list::

    area = create(name="area", length=1)

    @area.when([instance_of(Circle)])
    def _(shape):
        return math.pi * shape.r ** 2

    area(Circle(r=1))
"""

import functools
import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any

from predispatch.config import GenericConfig
from predispatch.errors import NoMatchingHandler, RegistrationError
from predispatch.matching.dispatcher import Dispatcher, Handler
from predispatch.matching.trie import Predicate

logger = logging.getLogger("predispatch.generic")


class GenericFunction:
    """A callable dispatching on its leading arguments.

    Each instance owns its own ``Dispatcher``. Registration is not
    synchronized; finish calling ``when()`` before sharing the function
    between threads, or guard both sides with a lock.
    """

    def __init__(self, config: GenericConfig) -> None:
        self._config = config
        self._dispatcher = Dispatcher()
        self.__name__ = config.name
        self.__qualname__ = config.name

    @property
    def config(self) -> GenericConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def length(self) -> int:
        return self._config.length

    @property
    def default(self) -> Handler | None:
        return self._config.default

    @property
    def handlers(self) -> list[Handler]:
        """Registered handlers, depth-first in edge insertion order. Excludes the default."""
        return self._dispatcher.handlers

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        handler = self._dispatcher.get_handler(args[: self.length])
        if handler is None:
            handler = self.default
            if handler is None:
                raise NoMatchingHandler(self, args)
            logger.debug("%s: no handler matched %d argument(s), using default", self, len(args))
        return handler(*args, **kwargs)

    def when(
        self,
        predicates: Sequence[Predicate],
        handler: Handler | None = None,
    ) -> Any:
        """Register a handler for arguments accepted by ``predicates``.

        ``predicates`` must be a list or tuple of exactly ``length``
        callables. Registering the same predicate objects again replaces
        the earlier handler. Without ``handler``, returns a decorator::

            @area.when([instance_of(Square)])
            def _(shape):
                return shape.side ** 2

        Raises ``RegistrationError`` before anything is registered if
        either argument is invalid.
        """
        self._check_predicates(predicates)

        if handler is None:

            def decorator(func: Handler) -> Handler:
                self._register(predicates, func)
                return func

            return decorator

        self._register(predicates, handler)
        return None

    def _register(self, predicates: Sequence[Predicate], handler: Any) -> None:
        if not callable(handler):
            msg = f"Expecting a function as second argument, got {handler!r} instead"
            raise RegistrationError(msg)
        self._dispatcher.set_handler(tuple(predicates), handler)
        logger.debug("%s: registered %s", self, _describe(handler))

    def _check_predicates(self, predicates: Any) -> None:
        if not isinstance(predicates, (list, tuple)) or len(predicates) != self.length:
            msg = (
                f"Expecting an array of predicates of length {self.length} "
                f"as first argument, got {predicates!r} instead"
            )
            raise RegistrationError(msg)
        for pos, predicate in enumerate(predicates):
            if not callable(predicate):
                msg = f"Expecting a predicate function at position {pos}, got {predicate!r} instead"
                raise RegistrationError(msg)

    def __repr__(self) -> str:
        name = self.name or "<anonymous>"
        return f"<generic function {name}/{self.length}>"


def create(
    name: str = "",
    length: int = 0,
    default: Handler | None = None,
    *,
    config: GenericConfig | None = None,
) -> GenericFunction:
    """Create a generic function.

    Pass the fields directly or a prebuilt ``GenericConfig``, not both.
    Raises ``RegistrationError`` if both are given, if ``default`` is not
    callable, or if ``length`` is negative.
    """
    if config is not None:
        if name or length or default is not None:
            msg = "Pass either config or name/length/default to create(), not both"
            raise RegistrationError(msg)
    else:
        config = GenericConfig(name=name or "", length=length or 0, default=default)
    return GenericFunction(config)


def of(fn: Callable[..., Any]) -> GenericFunction:
    """Promote ``fn`` to a generic function that falls back to ``fn``.

    The name comes from ``fn.__name__`` and the arity from its leading
    positional parameters that have no default.
    """
    if not callable(fn):
        msg = f"Expecting a function, got {fn!r} instead"
        raise RegistrationError(msg)
    config = GenericConfig(
        name=getattr(fn, "__name__", ""),
        length=_positional_arity(fn),
        default=fn,
    )
    generic = GenericFunction(config)
    functools.update_wrapper(generic, fn, updated=())
    return generic


def _positional_arity(fn: Callable[..., Any]) -> int:
    """Count leading positional parameters up to the first default or ``*args``."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature
        return 0
    count = 0
    for param in signature.parameters.values():
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not param.empty:
            break
        count += 1
    return count


def _describe(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
