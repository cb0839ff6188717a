"""Looping special forms for Zeus: do and loop.

Each loop is implemented as a small evaluator object that holds the loop spec
and reuses the main evaluator to execute bodies in a scope of its own. Both
loops run inside an implicit block named nil, so ``(return-from nil value)``
leaves them.
"""

from __future__ import annotations
from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.symbol import GenSym, Keyword, Symbol
from zeus.types.errors import ZeusArityError, ZeusInvalidSymbol, ZeusTypeError
from zeus.types.expr import is_truthy
from zeus.evaluation.special_forms.block_forms import run_block
from zeus.evaluation.special_forms.progn_form import eval_body


class DoLoopEval:
    """Implements the (do ...) loop.

    varspecs: [(var init step?) ...]
    end_clause: [test expr*]
    body: repeated forms executed each iteration
    """

    def __init__(
        self,
        varspecs: list[SExpression],
        end_clause: list[SExpression],
        body: list[SExpression],
        evaluate_fn: EvaluatorFn,
    ):
        self.vars: list[tuple[str, SExpression, SExpression | None]] = [
            self._parse_varspec(spec) for spec in varspecs
        ]
        self.end_clause: list[SExpression] = end_clause
        self.body: list[SExpression] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    @staticmethod
    def _parse_varspec(spec: SExpression) -> tuple[str, SExpression, SExpression | None]:
        if not isinstance(spec, list) or len(spec) not in (2, 3):
            raise ZeusTypeError("do variable spec must be (var init [step])")
        var_name = spec[0]
        if isinstance(var_name, Keyword):
            raise ZeusInvalidSymbol("Cannot bind to a keyword")
        if not isinstance(var_name, (Symbol, GenSym)):
            raise ZeusTypeError(f"do loop variable must be a symbol, got {var_name}")
        step = spec[2] if len(spec) == 3 else None
        return var_name.name, spec[1], step

    def eval(self, env: Environment) -> LispValue:
        """Evaluate the do loop by stepping until the end test is true."""
        evaluate_fn = self.evaluate_fn
        test_expr, *exit_exprs = self.end_clause

        # 1: inits see the enclosing bindings only
        initial = [(name, evaluate_fn(init, env)) for name, init, _ in self.vars]

        with env.scope():
            for name, value in initial:
                env.define(name, value)

            # 2: loop
            while True:
                if is_truthy(evaluate_fn(test_expr, env)):
                    return eval_body(exit_exprs, env, evaluate_fn)

                eval_body(self.body, env, evaluate_fn)

                # 3: every step sees the previous iteration's values
                stepped = [
                    (name, evaluate_fn(step, env))
                    for name, _, step in self.vars
                    if step is not None
                ]
                for name, value in stepped:
                    env.define(name, value)


class LoopEval:
    """Implements the (loop body...) form: repeat the body until a non-local exit."""

    def __init__(self, body: list[SExpression], evaluate_fn: EvaluatorFn):
        self.body: list[SExpression] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    def eval(self, env: Environment) -> LispValue:
        with env.scope():
            while True:
                eval_body(self.body, env, self.evaluate_fn)


def do_loop_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(do ((var init [step])...) (test result...) body...)"""
    if len(tail) < 2:
        raise ZeusArityError("do requires variable specs and an end clause")
    varspecs, end_clause, *body = tail
    if not isinstance(varspecs, list):
        raise ZeusTypeError("do variable specs must be a list")
    if not isinstance(end_clause, list) or not end_clause:
        raise ZeusTypeError("do end clause must be a non-empty list")
    loop = DoLoopEval(varspecs, end_clause, body, evaluate_fn)
    return run_block("nil", lambda: loop.eval(env))


def loop_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(loop body...)"""
    loop = LoopEval(tail, evaluate_fn)
    return run_block("nil", lambda: loop.eval(env))
