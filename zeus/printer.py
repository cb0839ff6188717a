"""Render expressions as text.

``format_expr`` writes reader syntax, so a printed literal reads back as a
structurally equal expression. ``format_for_print`` is what print/println
write: the same, except strings and characters appear raw.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from io import StringIO

from zeus import LispValue
from zeus.types.character import Character
from zeus.types.cons import Cons, Vector
from zeus.types.hash_table import HashTable
from zeus.types.symbol import GenSym, Keyword, Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _format_float(value: float) -> str:
    text = repr(value)
    # Reader syntax has no exponent notation
    if "e" in text:
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def _quote_string(s: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in s) + '"'


def _write(buffer: StringIO, expr: LispValue, readable: bool) -> None:
    match expr:
        case int():
            buffer.write(str(expr))
        case float():
            buffer.write(_format_float(expr))
        case Fraction():
            buffer.write(f"{expr.numerator}/{expr.denominator}")
        case str():
            buffer.write(_quote_string(expr) if readable else expr)
        case Character():
            buffer.write(str(expr) if readable else expr.ch)
        case Symbol() | Keyword() | GenSym():
            buffer.write(str(expr))
        case list():
            buffer.write("(")
            for i, item in enumerate(expr):
                if i:
                    buffer.write(" ")
                _write(buffer, item, readable)
            buffer.write(")")
        case Cons():
            _write_cons(buffer, expr, readable)
        case Vector():
            buffer.write("[")
            for i, item in enumerate(expr):
                if i:
                    buffer.write(" ")
                _write(buffer, item, readable)
            buffer.write("]")
        case HashTable():
            buffer.write(f"#<hash-table:{len(expr)}>")
        case _:
            buffer.write(repr(expr))


def _write_cons(buffer: StringIO, cell: Cons, readable: bool) -> None:
    buffer.write("(")
    _write(buffer, cell.car, readable)
    tail = cell.cdr
    while True:
        if isinstance(tail, Cons):
            buffer.write(" ")
            _write(buffer, tail.car, readable)
            tail = tail.cdr
        elif isinstance(tail, list):
            for item in tail:
                buffer.write(" ")
                _write(buffer, item, readable)
            break
        else:
            buffer.write(" . ")
            _write(buffer, tail, readable)
            break
    buffer.write(")")


def format_expr(expr: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, expr, readable=True)
        return buffer.getvalue()


def format_for_print(expr: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, expr, readable=False)
        return buffer.getvalue()
