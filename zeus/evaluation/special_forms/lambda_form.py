from zeus.types.errors import ZeusArityError
from zeus.types.lambda_fn import make_lambda, validate_params

from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.environment import Environment


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body) is data: nothing is captured from `env`,
    # the body sees whatever scopes are live when the function is called.
    if len(tail) != 2:
        raise ZeusArityError("lambda requires exactly 2 arguments")

    params, body = tail
    validate_params(params)
    return make_lambda(params, body)
