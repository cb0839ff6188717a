"""Lambda representation and argument binding utilities for Zeus.

A function is plain data: the three-element list ``(lambda (params...) body)``.
It captures no environment; applying it binds the parameters in a fresh scope
on top of the caller's scope stack.
"""

from __future__ import annotations

from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusInvalidSymbol, ZeusTypeError
from zeus.types.symbol import GenSym, Keyword, LAMBDA, Symbol


def is_lambda(value: LispValue) -> bool:
    return isinstance(value, list) and len(value) == 3 and value[0] == LAMBDA


def make_lambda(params: list[SExpression], body: SExpression) -> list[SExpression]:
    return [LAMBDA, list(params), body]


def validate_params(params: SExpression) -> list[Symbol | GenSym]:
    """Check a parameter list: a list of symbols, none of them keywords."""
    if not isinstance(params, list):
        raise ZeusTypeError("Lambda parameters must be a list")
    for param in params:
        if isinstance(param, Keyword):
            raise ZeusInvalidSymbol("Lambda parameter cannot be a keyword")
        if not isinstance(param, (Symbol, GenSym)):
            raise ZeusTypeError("Lambda parameters must be symbols")
    return params


def bind_arguments(
    params: list[SExpression], args: list[LispValue], env: Environment
) -> None:
    """Bind each parameter to its argument in the innermost scope of `env`."""
    validate_params(params)
    if len(params) != len(args):
        raise ZeusArityError(
            f"Lambda expects {len(params)} arguments, got {len(args)}"
        )
    for param, arg in zip(params, args):
        env.define(param.name, arg)
