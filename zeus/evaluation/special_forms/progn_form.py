from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.environment import Environment


def eval_body(
    forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate forms in order, returning the last value (nil when empty)."""
    result: LispValue = []
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return eval_body(tail, env, evaluate_fn)
