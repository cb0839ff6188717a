"""Symbol builtins: gensym and the symbol property list.

Properties are keyed by symbol name and live in the Environment, outside the
scope stack, so they survive scope exits.
"""
from __future__ import annotations

from zeus import LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusTypeError
from zeus.types.expr import is_integer
from zeus.types.symbol import GenSym, Keyword, Symbol


def _symbol_name(name: str, value: LispValue) -> str:
    if not isinstance(value, (Symbol, Keyword, GenSym)):
        raise ZeusTypeError(f"{name} requires symbol arguments")
    return value.name


def gensym(env: Environment, args: list[LispValue]) -> GenSym:
    """(gensym), (gensym "prefix") or (gensym n) to restart the counter at n."""
    if len(args) > 1:
        raise ZeusArityError("gensym accepts at most 1 argument")
    if not args:
        return env.gen_sym()
    (arg,) = args
    if isinstance(arg, str):
        return env.gen_sym(prefix=arg)
    if is_integer(arg) and arg >= 0:
        return env.gen_sym(reset=arg)
    raise ZeusTypeError("gensym requires a string prefix or a non-negative integer")


def get(env: Environment, args: list[LispValue]) -> LispValue:
    """(get symbol property) - nil when the property was never set."""
    if len(args) != 2:
        raise ZeusArityError("get requires exactly 2 arguments")
    symbol, prop = args
    return env.get_property(_symbol_name("get", symbol), _symbol_name("get", prop))


def put(env: Environment, args: list[LispValue]) -> LispValue:
    """(put symbol property value) - returns value."""
    if len(args) != 3:
        raise ZeusArityError("put requires exactly 3 arguments")
    symbol, prop, value = args
    return env.put_property(
        _symbol_name("put", symbol), _symbol_name("put", prop), value
    )


def symbol_plist(env: Environment, args: list[LispValue]) -> list[LispValue]:
    if len(args) != 1:
        raise ZeusArityError("symbol-plist requires exactly 1 argument")
    return env.symbol_plist(_symbol_name("symbol-plist", args[0]))
