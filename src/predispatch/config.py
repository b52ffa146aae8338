"""Generic function configuration.

GenericConfig is a frozen dataclass — immutable after creation, shared
safely between a generic function and anything that inspects it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from predispatch.errors import RegistrationError


@dataclass(frozen=True, slots=True)
class GenericConfig:
    """Generic function configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = GenericConfig(name="area", length=1, default=unsupported)
    """

    # Reported in repr() and in NoMatchingHandler messages
    name: str = ""

    # Number of leading positional arguments used for dispatch
    length: int = 0

    # Called with the original arguments when nothing matches
    default: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or isinstance(self.length, bool) or self.length < 0:
            msg = f"Expecting a non-negative integer length, got {self.length!r} instead"
            raise RegistrationError(msg)
        if self.default is not None and not callable(self.default):
            msg = f"Expecting the default handler to be a function, got {self.default!r} instead"
            raise RegistrationError(msg)
