"""Predispatch exception hierarchy.

Shared across the generic function layer and its configuration so every
module raises and catches the same types. The matching core never raises.
"""

from typing import Any


class PredispatchError(Exception):
    """Base for all predispatch-specific errors."""


class RegistrationError(PredispatchError, TypeError):
    """Raised when a generic function is built or extended with bad input.

    Covers non-callable predicates, handlers and default handlers, and
    predicate sequences of the wrong length. Raised before anything is
    registered, so a rejected ``when()`` leaves the function unchanged.
    """


class NoMatchingHandler(PredispatchError):
    """No registered handler accepts the arguments and no default is set.

    ``generic`` is the generic function that was called and ``args`` the
    positional arguments it received, including any past its arity.
    """

    def __init__(self, generic: Any, args: tuple[Any, ...]) -> None:
        super().__init__()
        self.generic = generic
        # Call arguments, not constructor arguments; see __str__
        self.args = args

    def __str__(self) -> str:
        name = getattr(self.generic, "name", "")
        return f'Generic function "{name}" cannot be applied to arguments {self.args!r}'

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.generic, self.args))
