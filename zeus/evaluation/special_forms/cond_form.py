"""Special forms: cond and case.

- cond: multi-branch conditional on truthiness.
- case: multi-branch dispatch on a key compared against literal values.
"""

from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusTypeError
from zeus.types.expr import is_truthy, values_equal
from zeus.types.symbol import Symbol, T
from zeus.evaluation.special_forms.progn_form import eval_body

ELSE = Symbol("else")
OTHERWISE = Symbol("otherwise")


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn) -> LispValue:
    """Evaluate a (cond (test expr...) ...).

    For each clause in order:
    - Evaluate test; if truthy, evaluate the clause body sequentially and
      return the last value. If the clause has only the test, return the
      test's value.
    - The symbol `else` is truthy without being evaluated; an `else` clause
      with no body returns t.
    If no clause matches, return nil.
    """
    if not tail:
        raise ZeusArityError("cond requires at least 1 clause")

    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise ZeusTypeError("cond clause must be a non-empty list")
        test, *body = clause

        if test == ELSE:
            return eval_body(body, env, evaluate_fn) if body else T

        test_val = evaluate_fn(test, env)
        if is_truthy(test_val):
            if not body:
                return test_val
            return eval_body(body, env, evaluate_fn)

    # No clause matched
    return []


def _case_matches(key: LispValue, test_value: SExpression) -> bool:
    if isinstance(test_value, list):
        return any(values_equal(key, v) for v in test_value)
    return values_equal(key, test_value)


def case_form(tail: list[SExpression], env: Environment, evaluate_fn) -> LispValue:
    """Evaluate a (case key (values body...) ... (else body...)).

    The key is evaluated once; clause values are literal, either a single value
    or a list of candidates. `else` and `otherwise` match anything.
    """
    if not tail:
        raise ZeusArityError("case requires at least 1 argument")

    key = evaluate_fn(tail[0], env)

    for clause in tail[1:]:
        if not isinstance(clause, list) or not clause:
            raise ZeusTypeError("case clause must be a non-empty list")
        test_value, *body = clause
        if test_value in (ELSE, OTHERWISE) or _case_matches(key, test_value):
            return eval_body(body, env, evaluate_fn)

    return []
