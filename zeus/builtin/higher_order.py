"""Builtins that call back into the evaluator: mapcar, filter, remove,
reduce, apply and funcall.

A function argument is either a Symbol naming a builtin or lambda data; both
are applied through the shared application engine.
"""
from __future__ import annotations

from zeus import LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusError, ZeusTypeError
from zeus.types.expr import is_truthy
from zeus.evaluation.apply import apply as apply_engine
from zeus.evaluation.evaluator import evaluate


def _call(fn: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    return apply_engine(fn, args, env, evaluate)


def mapcar(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(mapcar f list...) - apply f across the lists, stopping at the shortest."""
    if len(args) < 2:
        raise ZeusArityError("mapcar requires a function and at least 1 list")
    fn, *lists = args
    for xs in lists:
        if not isinstance(xs, list):
            raise ZeusTypeError("mapcar requires list arguments")
    return [_call(fn, list(items), env) for items in zip(*lists)]


def _select(name: str, env: Environment, args: list[LispValue], keep: bool) -> list[LispValue]:
    if len(args) != 2:
        raise ZeusArityError(f"{name} requires exactly 2 arguments")
    pred, xs = args
    if not isinstance(xs, list):
        raise ZeusTypeError(f"{name} requires a list as second argument")
    return [x for x in xs if is_truthy(_call(pred, [x], env)) == keep]


def filter_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(filter pred list) - the elements for which pred is true."""
    return _select("filter", env, args, keep=True)


def remove(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(remove pred list) - the elements for which pred is false."""
    return _select("remove", env, args, keep=False)


def reduce(env: Environment, args: list[LispValue]) -> LispValue:
    """(reduce f list [initial]) - left fold."""
    if len(args) not in (2, 3):
        raise ZeusArityError("reduce requires 2 or 3 arguments")
    fn, xs = args[0], args[1]
    if not isinstance(xs, list):
        raise ZeusTypeError("reduce requires a list as second argument")

    if len(args) == 3:
        acc, rest = args[2], xs
    elif xs:
        acc, rest = xs[0], xs[1:]
    else:
        raise ZeusError("reduce of empty list with no initial value")

    for item in rest:
        acc = _call(fn, [acc, item], env)
    return acc


def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f args) - call f with the elements of the list args."""
    if len(args) != 2:
        raise ZeusArityError("apply requires exactly 2 arguments")
    fn, fn_args = args
    if not isinstance(fn_args, list):
        raise ZeusTypeError("apply requires a list as second argument")
    return _call(fn, list(fn_args), env)


def funcall(env: Environment, args: list[LispValue]) -> LispValue:
    """(funcall f arg...)"""
    if not args:
        raise ZeusArityError("funcall requires at least 1 argument")
    fn, *fn_args = args
    return _call(fn, fn_args, env)
