"""Binding special forms: let, let* and letrec.

All three take ``((name init) ...)`` followed by body forms and evaluate the
body in a fresh scope that is popped on every exit path. They differ only in
which bindings an initializer can see:

- let: none of the new ones; every init runs in the enclosing scope first.
- let*: the ones bound before it, left to right.
- letrec: all of them; names are pre-bound to nil before any init runs.
"""

from __future__ import annotations

from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusInvalidSymbol, ZeusTypeError
from zeus.types.symbol import GenSym, Keyword, Symbol
from zeus.evaluation.special_forms.progn_form import eval_body


def _parse_bindings(
    form: str, tail: list[SExpression]
) -> tuple[list[tuple[str, SExpression]], list[SExpression]]:
    if len(tail) < 2:
        raise ZeusArityError(f"{form} requires at least 2 arguments")

    bindings, *body = tail
    if not isinstance(bindings, list):
        raise ZeusTypeError(f"{form} bindings must be a list")

    pairs = []
    for binding in bindings:
        if not isinstance(binding, list) or len(binding) != 2:
            raise ZeusTypeError(f"{form} binding must be a list of two elements")
        name, init = binding
        if isinstance(name, Keyword):
            raise ZeusInvalidSymbol("Cannot bind to a keyword")
        if not isinstance(name, (Symbol, GenSym)):
            raise ZeusTypeError(f"{form} binding must start with a symbol")
        pairs.append((name.name, init))
    return pairs, body


def let_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    pairs, body = _parse_bindings("let", tail)
    values = [(name, evaluate_fn(init, env)) for name, init in pairs]
    with env.scope():
        for name, value in values:
            env.define(name, value)
        return eval_body(body, env, evaluate_fn)


def let_star_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    pairs, body = _parse_bindings("let*", tail)
    with env.scope():
        for name, init in pairs:
            env.define(name, evaluate_fn(init, env))
        return eval_body(body, env, evaluate_fn)


def letrec_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    pairs, body = _parse_bindings("letrec", tail)
    with env.scope():
        for name, _ in pairs:
            env.define(name, [])
        for name, init in pairs:
            env.define(name, evaluate_fn(init, env))
        return eval_body(body, env, evaluate_fn)
