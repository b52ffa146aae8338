"""Vectors — two-argument dispatch with a promoted function.

``of()`` turns a plain ``add`` into a generic function that keeps
``add`` as its default. Handlers for sequences and mappings are layered
on top; everything else still goes through ``+``.

Run:
    python app.py
"""

from predispatch import of
from predispatch.predicates import instance_of, is_sequence


def add(x, y):
    return x + y


add = of(add)

is_mapping = instance_of(dict)


@add.when([is_sequence, is_sequence])
def add_sequences(xs, ys):
    return [add(x, y) for x, y in zip(xs, ys, strict=True)]


@add.when([is_mapping, is_mapping])
def add_mappings(a, b):
    result = dict(a)
    for key, value in b.items():
        result[key] = add(result[key], value) if key in result else value
    return result


if __name__ == "__main__":
    print(add(5, 6))
    print(add([7, 2], [3, 4]))
    print(add({"a": 1, "b": [1, 2]}, {"b": [10, 20], "c": 3}))
    print(add("ab", "cd"))
