# Core type aliases for Zeus's data model.
# Expressions are plain Python values where Python has a matching type
# (int, float, Fraction, str, list) and small classes from zeus.types
# otherwise (symbols, Character, Cons, Vector, HashTable).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type: passed into special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
