"""Shapes — one-argument dispatch on dataclass types.

Demonstrates the decorator form of ``when()``, ``instance_of()``
predicates, and a default handler for unknown shapes.

Run:
    python app.py
"""

import math
from dataclasses import dataclass

from predispatch import create
from predispatch.predicates import instance_of


@dataclass(frozen=True, slots=True)
class Circle:
    r: float


@dataclass(frozen=True, slots=True)
class Rect:
    w: float
    h: float


class Square(Rect):
    """A Rect whose sides are equal."""


def _unsupported(shape):
    msg = f"area() does not know {type(shape).__name__}"
    raise ValueError(msg)


area = create(name="area", length=1, default=_unsupported)


@area.when([instance_of(Circle)])
def circle_area(shape: Circle) -> float:
    return math.pi * shape.r**2


@area.when([instance_of(Rect)])
def rect_area(shape: Rect) -> float:
    return shape.w * shape.h


# Registered after Rect, so it is tried first for squares
@area.when([instance_of(Square)])
def square_area(shape: Square) -> float:
    return shape.w**2


if __name__ == "__main__":
    for shape in (Circle(1.0), Rect(2.0, 3.0), Square(4.0, 4.0)):
        print(f"{shape!r}: {area(shape):.2f}")
