from __future__ import annotations

import logging

from zeus import LispValue, SExpression
from zeus.builtin.env_builtin import register
from zeus.evaluation.evaluator import evaluate
from zeus.printer import format_expr
from zeus.reader.parser import read, read_all
from zeus.types.environment import Environment
from zeus.types.errors import ControlSignal, ZeusError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A Zeus session: one Environment holding builtins, top-level definitions,
    symbol properties and the gensym counter, shared by every evaluation.
    """

    def __init__(self, prelude: str | None = None):
        self.env = Environment()
        register(self.env)
        logger.debug("session created with %d base bindings", len(self.env.scopes[0]))

        if prelude:
            self.eval_prelude(prelude)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate an already-read expression.

        Control signals (throw, return-from, go) that nothing consumed propagate
        to the caller unchanged.
        """
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read exactly one expression from `code` and evaluate it.

        An unconsumed control signal is reported as a ZeusError carrying its
        description, so callers only ever see ZeusError.
        """
        logger.debug("eval: %s", code)
        expr = read(code)
        try:
            return evaluate(expr, self.env)
        except ControlSignal as sig:
            logger.debug("signal reached the session boundary: %s", sig.describe())
            raise ZeusError(sig.describe()) from sig

    def eval_prelude(self, code: str) -> LispValue:
        """Evaluate every top-level form of `code`; returns the last value."""
        result: LispValue = []
        for expr in read_all(code):
            try:
                result = evaluate(expr, self.env)
            except ControlSignal as sig:
                raise ZeusError(sig.describe()) from sig
        return result

    def format(self, value: LispValue) -> str:
        return format_expr(value)
