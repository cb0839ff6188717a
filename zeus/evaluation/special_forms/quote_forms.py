from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.errors import ZeusArityError


def quote_form(tail: list[SExpression], env, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise ZeusArityError("quote requires exactly 1 argument")
    return tail[0]
