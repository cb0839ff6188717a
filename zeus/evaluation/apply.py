"""Application engine for Zeus.

A function value is either a Symbol naming a builtin or a lambda-data list
``(lambda (params...) body)``. Both the evaluator and the higher-order
builtins (mapcar, apply, funcall, ...) go through ``apply`` so the two share
one set of rules.
"""

from zeus import LispValue, EvaluatorFn
from zeus.printer import format_expr
from zeus.types.environment import Environment
from zeus.types.errors import ZeusError
from zeus.types.lambda_fn import bind_arguments, is_lambda
from zeus.types.symbol import Symbol


def apply_lambda(
    fn: list[LispValue],
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply lambda data to already-evaluated arguments.

    The parameters are bound in a fresh scope pushed on the caller's stack, so
    free names in the body resolve against the bindings live at call time.
    The scope is popped on every exit path, including errors and non-local
    exits.
    """
    _, params, body = fn
    with env.scope():
        bind_arguments(params, args, env)
        return evaluate_fn(body, env)


def apply(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a builtin-name Symbol or lambda data to `args`."""
    if isinstance(fn, Symbol):
        from zeus.builtin.env_builtin import BUILTINS

        builtin = BUILTINS.get(fn.name)
        if builtin is None:
            raise ZeusError(f"Unknown function: {fn.name}")
        return builtin(env, args)
    if is_lambda(fn):
        return apply_lambda(fn, args, env, evaluate_fn)
    raise ZeusError(f"Cannot apply: {format_expr(fn)}")
