"""Core evaluator for the Zeus interpreter.

Recursive, applicative-order evaluation: atoms evaluate to themselves,
symbols resolve through the Environment, lists either dispatch to a special
form or evaluate head and arguments left to right and apply the head's value.
No tail-call elimination is performed.
"""

from __future__ import annotations

from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.symbol import GenSym, Keyword, Symbol
from zeus.evaluation.apply import apply
from zeus.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Keyword():
            return expr
        case Symbol() | GenSym():
            return env.lookup(expr.name)
        case list() if not expr:
            return []
        case list():
            head, *tail_args = expr
            # Special forms receive their operands unevaluated
            if type(head) is Symbol and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Atoms return as-is ---
    return expr
