"""Arithmetic and comparison builtins.

Integers stay exact: when every operand is an Integer and the exact result
has no fractional part the result is an Integer, otherwise it is a Float.
Integer results must fit in 64 bits.
"""
from __future__ import annotations

from fractions import Fraction
from itertools import combinations

from zeus import LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusDivisionByZero, ZeusTypeError
from zeus.types.expr import bool_to_expr, check_int64, is_integer, is_number, values_equal


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for arg in args:
        if not is_number(arg):
            raise ZeusTypeError(f"{name} requires numeric arguments")
    return args


def _exact(values: list[LispValue]) -> bool:
    return all(is_integer(v) for v in values)


def _result(value: LispValue, exact: bool) -> LispValue:
    """Collapse an exact result to Integer when possible, else promote to Float."""
    if exact and (is_integer(value) or value.denominator == 1):
        return check_int64(int(value))
    return float(value)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    _numbers("+", args)
    return _result(sum(args, 0), _exact(args))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first argument; unary negation for one argument."""
    if not args:
        raise ZeusArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return _result(-args[0], _exact(args))
    result = args[0]
    for x in args[1:]:
        result -= x
    return _result(result, _exact(args))


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    _numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return _result(result, _exact(args))


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right; one argument gives the reciprocal."""
    if not args:
        raise ZeusArityError("/ requires at least 1 argument")
    _numbers("/", args)
    operands = [1, *args] if len(args) == 1 else args
    if any(x == 0 for x in operands[1:]):
        raise ZeusDivisionByZero("Division by zero")

    exact = _exact(operands)
    if exact:
        result = Fraction(operands[0])
        for x in operands[1:]:
            result /= x
    else:
        result = float(operands[0])
        for x in operands[1:]:
            result /= float(x)
    return _result(result, exact)


# -------------------------------
# Comparison
# -------------------------------
def _comparison_args(name: str, args: list[LispValue]) -> list[LispValue]:
    if len(args) < 2:
        raise ZeusArityError(f"{name} requires at least 2 arguments")
    return args


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """t when every pair of arguments is equal; numbers compare across types."""
    _comparison_args("=", args)
    return bool_to_expr(all(values_equal(a, b) for a, b in combinations(args, 2)))


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    """t when every pair of arguments differs."""
    _comparison_args("/=", args)
    return bool_to_expr(
        all(not values_equal(a, b) for a, b in combinations(args, 2))
    )


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    """Chainable less-than: t if a0 < a1 < a2 ... holds for all adjacent pairs."""
    _numbers("<", _comparison_args("<", args))
    return bool_to_expr(all(a < b for a, b in zip(args, args[1:])))


def lte(env: Environment, args: list[LispValue]) -> LispValue:
    _numbers("<=", _comparison_args("<=", args))
    return bool_to_expr(all(a <= b for a, b in zip(args, args[1:])))


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    _numbers(">", _comparison_args(">", args))
    return bool_to_expr(all(a > b for a, b in zip(args, args[1:])))


def gte(env: Environment, args: list[LispValue]) -> LispValue:
    _numbers(">=", _comparison_args(">=", args))
    return bool_to_expr(all(a >= b for a, b in zip(args, args[1:])))
