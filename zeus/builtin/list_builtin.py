"""List builtins: construction, access and structural queries.

Lists are Python lists and the empty list is nil. ``cons`` onto a list
prepends; ``cons`` onto anything else builds a dotted Cons pair, which
``car`` and ``cdr`` also accept.
"""
from __future__ import annotations

from zeus import LispValue
from zeus.types.cons import Cons, Vector
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusIndexError, ZeusTypeError
from zeus.types.expr import is_integer, values_equal


def _expect_args(name: str, args: list[LispValue], n: int) -> list[LispValue]:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise ZeusArityError(f"{name} requires exactly {n} {plural}")
    return args


def _index_arg(name: str, value: LispValue) -> int:
    if not is_integer(value) or value < 0:
        raise ZeusTypeError(f"{name} index must be a non-negative integer")
    return value


def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a list or pair; nil for the empty list."""
    (xs,) = _expect_args("car", args, 1)
    if isinstance(xs, Cons):
        return xs.car
    if isinstance(xs, list):
        return xs[0] if xs else []
    raise ZeusTypeError("car requires a list or cons")


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Everything after the first element of a list, or the tail of a pair."""
    (xs,) = _expect_args("cdr", args, 1)
    if isinstance(xs, Cons):
        return xs.cdr
    if isinstance(xs, list):
        return xs[1:]
    raise ZeusTypeError("cdr requires a list or cons")


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """Prepend head to a list tail, otherwise build the pair (head . tail)."""
    head, tail = _expect_args("cons", args, 2)
    if isinstance(tail, list):
        return [head, *tail]
    return Cons(head, tail)


def append(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new list."""
    result: list[LispValue] = []
    for item in args:
        if not isinstance(item, list):
            raise ZeusTypeError("append requires list arguments")
        result.extend(item)
    return result


def reverse(env: Environment, args: list[LispValue]) -> list[LispValue]:
    (xs,) = _expect_args("reverse", args, 1)
    if not isinstance(xs, list):
        raise ZeusTypeError("reverse requires a list")
    return xs[::-1]


def length(env: Environment, args: list[LispValue]) -> int:
    """Element count of a list or vector, or character count of a string."""
    (xs,) = _expect_args("length", args, 1)
    if not isinstance(xs, (list, str, Vector)):
        raise ZeusTypeError("length requires a list, string or vector")
    return len(xs)


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    """(nth index list)"""
    index, xs = _expect_args("nth", args, 2)
    index = _index_arg("nth", index)
    if not isinstance(xs, list):
        raise ZeusTypeError("nth requires a list as second argument")
    if index >= len(xs):
        raise ZeusIndexError("nth index out of bounds")
    return xs[index]


def nthcdr(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(nthcdr n list) - the list without its first n elements."""
    n, xs = _expect_args("nthcdr", args, 2)
    n = _index_arg("nthcdr", n)
    if not isinstance(xs, list):
        raise ZeusTypeError("nthcdr requires a list as second argument")
    return xs[n:]


def member(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(member item list) - the tail starting at the first equal element, else nil."""
    item, xs = _expect_args("member", args, 2)
    if not isinstance(xs, list):
        raise ZeusTypeError("member requires a list as second argument")
    for i, elem in enumerate(xs):
        if values_equal(item, elem):
            return xs[i:]
    return []
