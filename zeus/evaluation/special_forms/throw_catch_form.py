# Catch / throw and unwind-protect
# Usage:
#   ````
#   (catch 'my-tag
#     (throw 'my-tag 42)) ; => 42
#
#   (catch 'my-tag
#     (throw 'other 1))   ; => error: Uncaught throw for tag other
#
#   (unwind-protect
#     (throw 'out 1)
#     (println "cleanup")) ; prints cleanup, then the throw keeps going


from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.errors import EvalError, ThrowSignal, ZeusArityError
from zeus.types.expr import structurally_equal
from zeus.evaluation.special_forms.progn_form import eval_body


def throw_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise ZeusArityError("throw requires exactly 2 arguments")
    tag_expr, val_expr = tail
    tag = evaluate_fn(tag_expr, env)
    val = evaluate_fn(val_expr, env)
    raise ThrowSignal(tag, val)


def catch_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (catch tag body...)
    - Evaluates tag, then the body forms in order.
    - A throw whose tag is structurally equal ends the catch with its value.
    - Any other throw or error passes through untouched.
    """
    if not tail:
        raise ZeusArityError("catch requires a tag")

    tag = evaluate_fn(tail[0], env)

    try:
        return eval_body(tail[1:], env, evaluate_fn)
    except ThrowSignal as ex:
        if structurally_equal(ex.tag, tag):
            return ex.value
        raise


def _run_cleanups(
    forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> None:
    first_error: EvalError | None = None
    for form in forms:
        try:
            evaluate_fn(form, env)
        except EvalError as err:
            if first_error is None:
                first_error = err
    if first_error is not None:
        raise first_error


def unwind_protect_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (unwind-protect protected cleanup...)
    Every cleanup form runs exactly once however the protected form exits.
    An error in a cleanup replaces the protected form's result or error.
    """
    if not tail:
        raise ZeusArityError("unwind-protect requires a protected form")

    try:
        return evaluate_fn(tail[0], env)
    finally:
        _run_cleanups(tail[1:], env, evaluate_fn)
