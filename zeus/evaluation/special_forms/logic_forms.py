from zeus import SExpression
from zeus.types.environment import Environment
from zeus.types.expr import is_truthy
from zeus.types.symbol import T


def and_form(tail: list[SExpression], env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    (the empty list) is found, which is returned immediately. If all operands
    are truthy, returns the value of the last operand. With zero operands,
    returns t.
    """
    result: SExpression = T
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_truthy(result):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, or there are no operands, returns nil.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return []
