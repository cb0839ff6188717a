"""Dotted pairs and vectors.

Lists are plain Python lists. A Cons only appears when ``cons`` is given a
second argument that is not a list, so ``(cons 1 2)`` is ``(1 . 2)`` while
``(cons 1 (list 2))`` is the list ``(1 2)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from zeus import LispValue


@dataclass(frozen=True)
class Cons:
    car: LispValue
    cdr: LispValue


class Vector(tuple):
    """Fixed-size, immutable sequence. Updates build a new Vector."""

    __slots__ = ()

    def set(self, index: int, value: LispValue) -> Vector:
        items = list(self)
        items[index] = value
        return Vector(items)

    def __repr__(self):
        return f"Vector({list(self)!r})"
