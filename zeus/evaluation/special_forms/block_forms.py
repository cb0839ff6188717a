"""Lexical non-local exits: block/return-from and tagbody/go.

``return-from`` and ``go`` raise a signal; the nearest enclosing ``block`` or
``tagbody`` that owns the name or label consumes it and everything else
re-raises it unchanged.

    (block done
      (return-from done 42)
      (print "never"))                ; => 42

    (let ((i 0))
      (tagbody
        top
        (define i (+ i 1))
        (when (< i 3) (go top))))     ; => nil, with i at 3
"""

from __future__ import annotations

from typing import Callable

from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import GoSignal, ReturnFromSignal, ZeusArityError, ZeusTypeError
from zeus.types.symbol import GenSym, Symbol
from zeus.evaluation.special_forms.progn_form import eval_body


def block_name(expr: SExpression, form: str) -> str:
    """Name carried by a block signal; `nil` and () both name the nil block."""
    if isinstance(expr, (Symbol, GenSym)):
        return expr.name
    if isinstance(expr, list) and not expr:
        return "nil"
    raise ZeusTypeError(f"{form} requires a symbol as block name")


def run_block(name: str, body: Callable[[], LispValue]) -> LispValue:
    """Run `body`, absorbing a return-from aimed at the block called `name`."""
    try:
        return body()
    except ReturnFromSignal as sig:
        if sig.name != name:
            raise
        return sig.value


def block_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(block name body...) - the name is not evaluated."""
    if not tail:
        raise ZeusArityError("block requires a name")
    name = block_name(tail[0], "block")
    return run_block(name, lambda: eval_body(tail[1:], env, evaluate_fn))


def return_from_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(return-from name [value]) - value defaults to nil."""
    if len(tail) not in (1, 2):
        raise ZeusArityError("return-from requires a block name and an optional value")
    name = block_name(tail[0], "return-from")
    value = evaluate_fn(tail[1], env) if len(tail) == 2 else []
    raise ReturnFromSignal(name, value)


def _label(form: SExpression) -> str | None:
    if isinstance(form, (Symbol, GenSym)):
        return form.name
    return None


def tagbody_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(tagbody label-or-form...)

    Symbols at the top level are labels and are skipped when reached. A go to
    one of them resumes with the form after that label. Returns nil.
    """
    labels: dict[str, int] = {}
    for pos, form in enumerate(tail):
        label = _label(form)
        if label is not None:
            labels.setdefault(label, pos)

    pc = 0
    while pc < len(tail):
        form = tail[pc]
        pc += 1
        if _label(form) is not None:
            continue
        try:
            evaluate_fn(form, env)
        except GoSignal as sig:
            if sig.label not in labels:
                raise
            pc = labels[sig.label] + 1
    return []


def go_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ZeusArityError("go requires exactly 1 argument")
    label = _label(tail[0])
    if label is None:
        raise ZeusTypeError("go requires a symbol as label")
    raise GoSignal(label)
