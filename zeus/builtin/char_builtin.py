"""Character builtins and the one-argument type predicates."""
from __future__ import annotations

from fractions import Fraction

from zeus import LispValue
from zeus.types.character import Character
from zeus.types.cons import Cons, Vector
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusError, ZeusTypeError
from zeus.types.expr import bool_to_expr, is_integer, is_number
from zeus.types.hash_table import HashTable
from zeus.types.symbol import GenSym, Keyword, Symbol

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def _characters(name: str, args: list[LispValue]) -> list[int]:
    if len(args) < 2:
        raise ZeusArityError(f"{name} requires at least 2 arguments")
    codes = []
    for arg in args:
        if not isinstance(arg, Character):
            raise ZeusTypeError(f"{name} requires character arguments")
        codes.append(arg.code)
    return codes


def char_equal(env: Environment, args: list[LispValue]) -> LispValue:
    codes = _characters("char=", args)
    return bool_to_expr(all(a == b for a, b in zip(codes, codes[1:])))


def char_less(env: Environment, args: list[LispValue]) -> LispValue:
    codes = _characters("char<", args)
    return bool_to_expr(all(a < b for a, b in zip(codes, codes[1:])))


def char_greater(env: Environment, args: list[LispValue]) -> LispValue:
    codes = _characters("char>", args)
    return bool_to_expr(all(a > b for a, b in zip(codes, codes[1:])))


def char_to_integer(env: Environment, args: list[LispValue]) -> int:
    if len(args) != 1:
        raise ZeusArityError("char->integer requires exactly 1 argument")
    if not isinstance(args[0], Character):
        raise ZeusTypeError("char->integer requires a character")
    return args[0].code


def integer_to_char(env: Environment, args: list[LispValue]) -> Character:
    """Unicode scalar value to Character; surrogates and values past 0x10FFFF are rejected."""
    if len(args) != 1:
        raise ZeusArityError("integer->char requires exactly 1 argument")
    code = args[0]
    if not is_integer(code):
        raise ZeusTypeError("integer->char requires an integer")
    if code < 0 or code > MAX_CODE_POINT or code in SURROGATES:
        raise ZeusError(f"Invalid character code: {code}")
    return Character(chr(code))


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(name: str, test):
    def predicate(env: Environment, args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise ZeusArityError(f"{name} requires exactly 1 argument")
        return bool_to_expr(test(args[0]))

    predicate.__name__ = name
    predicate.__doc__ = f"({name} x) - t or nil."
    return predicate


TYPE_PREDICATES = {
    "integerp": _predicate("integerp", is_integer),
    "floatp": _predicate("floatp", lambda x: isinstance(x, float)),
    "rationalp": _predicate("rationalp", lambda x: isinstance(x, Fraction)),
    "numberp": _predicate("numberp", is_number),
    "characterp": _predicate("characterp", lambda x: isinstance(x, Character)),
    "vectorp": _predicate("vectorp", lambda x: isinstance(x, Vector)),
    "hash-table-p": _predicate("hash-table-p", lambda x: isinstance(x, HashTable)),
    "stringp": _predicate("stringp", lambda x: isinstance(x, str)),
    "symbolp": _predicate("symbolp", lambda x: isinstance(x, (Symbol, GenSym, Keyword))),
    "keywordp": _predicate("keywordp", lambda x: isinstance(x, Keyword)),
    "listp": _predicate("listp", lambda x: isinstance(x, list)),
    "consp": _predicate("consp", lambda x: isinstance(x, Cons) or (isinstance(x, list) and bool(x))),
    "null": _predicate("null", lambda x: isinstance(x, list) and not x),
}
