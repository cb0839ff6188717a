from __future__ import annotations

from zeus import LispValue
from zeus.printer import format_for_print
from zeus.types.environment import Environment


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Write each argument's display text with no separator; returns the last argument."""
    print("".join(format_for_print(a) for a in args), end="", flush=True)
    return args[-1] if args else []


def println_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Write each argument on its own line; returns the last argument."""
    for a in args:
        print(format_for_print(a))
    return args[-1] if args else []
