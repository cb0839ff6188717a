"""Truthiness, number tests and the two equality relations over expressions.

``structurally_equal`` is the data-model equality: type-aware and recursive,
with hash tables compared as sets of entries. ``values_equal`` is the looser
predicate shared by ``member``, ``reduce`` callers, ``case`` and ``=``: numbers
compare across Integer/Float/Rational, lists and conses compare element-wise
with the same predicate.
"""

from __future__ import annotations

import math
import sys
from fractions import Fraction

from zeus import LispValue
from zeus.types.cons import Cons, Vector
from zeus.types.errors import ZeusError
from zeus.types.hash_table import HashTable
from zeus.types.symbol import T

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_truthy(value: LispValue) -> bool:
    """Only the empty list is false."""
    return not (isinstance(value, list) and not value)


def bool_to_expr(value: bool) -> LispValue:
    return T if value else []


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: LispValue) -> bool:
    return is_integer(value) or isinstance(value, (float, Fraction))


def structurally_equal(a: LispValue, b: LispValue) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, Vector)):
        return len(a) == len(b) and all(
            structurally_equal(x, y) for x, y in zip(a, b)
        )
    if isinstance(a, Cons):
        return structurally_equal(a.car, b.car) and structurally_equal(a.cdr, b.cdr)
    if isinstance(a, HashTable):
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not structurally_equal(value, b.get(key)):
                return False
        return True
    return a == b


def numbers_equal(a: LispValue, b: LispValue) -> bool:
    if isinstance(a, float) or isinstance(b, float):
        # Tolerance is relative to the operands' magnitude
        return a == b or math.isclose(float(a), float(b), rel_tol=sys.float_info.epsilon)
    return a == b


def values_equal(a: LispValue, b: LispValue) -> bool:
    if is_number(a) and is_number(b):
        return numbers_equal(a, b)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Cons) and isinstance(b, Cons):
        return values_equal(a.car, b.car) and values_equal(a.cdr, b.cdr)
    return structurally_equal(a, b)


def check_int64(value: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise ZeusError("Integer overflow")
    return value
