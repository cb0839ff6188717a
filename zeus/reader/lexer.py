"""
  Zeus Lexer

Turns source text into a lazy stream of ``(token_type, token_value)`` tuples:

    - lparen / rparen       "(" / ")"
    - lbracket / rbracket   "[" / "]"
    - quote                 "'"
    - symbol                name
    - keyword               name, without the leading ":"
    - integer / float       int / float
    - rational              (numerator, denominator)
    - string                decoded text
    - char                  one-character str

Whitespace separates tokens and ``;`` comments run to the end of the line.
Any malformed input raises ZeusSyntaxError at the point it is reached.
"""

from __future__ import annotations

import math
import re
from typing import Iterator

from zeus.types.character import NAMED_CHARS
from zeus.types.errors import ZeusSyntaxError
from zeus.types.expr import INT64_MAX, INT64_MIN

Token = tuple[str, object]

SYMBOL_RE = re.compile(r"[\w+\-*/<>=!?]+")
NUMBER_RE = re.compile(r"-?[0-9]+(?:(?P<fraction>\.[0-9]*)|/(?P<denominator>[0-9]*))?")
DIGITS = "0123456789"
CHAR_NAME_RE = re.compile(r"[^\W\d_]+")

DELIMITERS: dict[str, str] = {
    "(": "lparen",
    ")": "rparen",
    "[": "lbracket",
    "]": "rbracket",
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


def _parse_int(text: str, what: str = "integer") -> int:
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise ZeusSyntaxError(f"Invalid {what}")
    return value


def _read_number(source: str, pos: int) -> tuple[Token, int]:
    m = NUMBER_RE.match(source, pos)
    text = m.group(0)
    if m.group("fraction") is not None:
        value = float(text)
        if not math.isfinite(value):
            raise ZeusSyntaxError("Invalid float")
        return ("float", value), m.end()
    denominator = m.group("denominator")
    if denominator is not None:
        if not denominator:
            raise ZeusSyntaxError("Invalid rational number")
        numerator_text = text[: text.index("/")]
        num = _parse_int(numerator_text, "numerator")
        den = _parse_int(denominator, "denominator")
        if den == 0:
            raise ZeusSyntaxError("Denominator cannot be zero")
        return ("rational", (num, den)), m.end()
    return ("integer", _parse_int(text)), m.end()


def _read_string(source: str, pos: int) -> tuple[Token, int]:
    # pos points at the opening quote
    pos += 1
    n = len(source)
    chars: list[str] = []
    while pos < n:
        ch = source[pos]
        if ch == '"':
            return ("string", "".join(chars)), pos + 1
        if ch == "\\":
            if pos + 1 >= n:
                break
            escaped = source[pos + 1]
            chars.append(STRING_ESCAPES.get(escaped, "\\" + escaped))
            pos += 2
            continue
        chars.append(ch)
        pos += 1
    raise ZeusSyntaxError("Unterminated string")


def _read_character(source: str, pos: int) -> tuple[Token, int]:
    # pos points at the '#'
    pos += 1
    if pos >= len(source) or source[pos] != "\\":
        raise ZeusSyntaxError("Invalid character literal: expected '\\'")
    pos += 1
    if pos >= len(source):
        raise ZeusSyntaxError("Invalid character literal: unexpected end of input")
    m = CHAR_NAME_RE.match(source, pos)
    if m is None:
        # Single non-alphabetic character, e.g. #\( or #\1
        return ("char", source[pos]), pos + 1
    name = m.group(0)
    if name in NAMED_CHARS:
        return ("char", NAMED_CHARS[name]), m.end()
    if len(name) == 1:
        return ("char", name), m.end()
    raise ZeusSyntaxError(f"Unknown character name: {name}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        ch = source[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch == ";":
            end = source.find("\n", pos)
            pos = n if end == -1 else end + 1
            continue

        if ch in DELIMITERS:
            yield DELIMITERS[ch], ch
            pos += 1
            continue

        if ch == "'":
            yield "quote", ch
            pos += 1
            continue

        if ch == '"':
            token, pos = _read_string(source, pos)
            yield token
            continue

        if ch == "#":
            token, pos = _read_character(source, pos)
            yield token
            continue

        if ch in DIGITS or (ch == "-" and pos + 1 < n and source[pos + 1] in DIGITS):
            token, pos = _read_number(source, pos)
            yield token
            continue

        if ch == ":":
            m = SYMBOL_RE.match(source, pos + 1)
            if m is None:
                raise ZeusSyntaxError("Invalid keyword: empty name after ':'")
            yield "keyword", m.group(0)
            pos = m.end()
            continue

        m = SYMBOL_RE.match(source, pos)
        if m is None:
            raise ZeusSyntaxError(f"Unexpected character: {ch!r}")
        yield "symbol", m.group(0)
        pos = m.end()
