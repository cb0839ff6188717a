from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.errors import ZeusArityError, ZeusInvalidSymbol, ZeusTypeError
from zeus.types.environment import Environment
from zeus.types.lambda_fn import make_lambda, validate_params
from zeus.types.symbol import GenSym, Keyword, PROGN, Symbol


def _definition_name(target: SExpression, form: str) -> str:
    if isinstance(target, Keyword):
        raise ZeusInvalidSymbol(f"Cannot {form} a keyword")
    if not isinstance(target, (Symbol, GenSym)):
        raise ZeusTypeError(f"First argument to {form} must be a symbol")
    return target.name


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds name in the innermost scope and returns the value.
    """
    if len(tail) != 2:
        raise ZeusArityError("define requires exactly 2 arguments")

    target, val_expr = tail
    name = _definition_name(target, "define")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body...)
    Sugar for (define name (lambda (params...) body)); several body forms are
    wrapped in progn. Returns the name symbol.
    """
    if len(tail) < 3:
        raise ZeusArityError(
            "defun requires at least 3 arguments: name, params, and body"
        )

    target, params, *body_forms = tail
    name = _definition_name(target, "defun")
    validate_params(params)

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [PROGN, *body_forms]

    env.define(name, make_lambda(params, body))
    return target
