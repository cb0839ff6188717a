from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.errors import ZeusArityError
from zeus.types.environment import Environment
from zeus.types.expr import is_truthy
from zeus.evaluation.special_forms.progn_form import eval_body


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ZeusArityError("if requires a condition, a then-expression and an optional else")

    cond = evaluate_fn(tail[0], env)
    # Only the empty list is false
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return []


def when_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise ZeusArityError("when requires a condition")
    if is_truthy(evaluate_fn(tail[0], env)):
        return eval_body(tail[1:], env, evaluate_fn)
    return []


def unless_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise ZeusArityError("unless requires a condition")
    if not is_truthy(evaluate_fn(tail[0], env)):
        return eval_body(tail[1:], env, evaluate_fn)
    return []
