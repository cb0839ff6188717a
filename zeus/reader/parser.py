"""
  Zeus Reader

- Recursive descent over the lexer's token stream, one token of lookahead
- Emits Python values directly:

    - lists -> Python list (the empty list is nil)
    - vectors -> Vector
    - symbols -> Symbol, keywords -> Keyword
    - integers -> int, decimals -> float, n/d -> Fraction
    - strings -> str, characters -> Character
    - 'x -> [quote, x]
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterator, Optional

from zeus import SExpression
from zeus.reader.lexer import lex, Token
from zeus.types.character import Character
from zeus.types.cons import Vector
from zeus.types.errors import ZeusSyntaxError
from zeus.types.symbol import Keyword, QUOTE, Symbol


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], object]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], object]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()

        match tok_type:
            case None:
                raise ZeusSyntaxError("Unexpected end of input")
            case "integer" | "float" | "string":
                return tok_val
            case "rational":
                num, den = tok_val
                return Fraction(num, den)
            case "char":
                return Character(tok_val)
            case "symbol":
                return Symbol(tok_val)
            case "keyword":
                return Keyword(tok_val)
            case "quote":
                return [QUOTE, self.parse_expr()]
            case "lparen":
                items = []
                while True:
                    next_type, _ = self.peek()
                    if next_type is None:
                        raise ZeusSyntaxError("Unexpected end of input")
                    if next_type == "rparen":
                        self.advance()
                        return items
                    items.append(self.parse_expr())
            case "lbracket":
                items = []
                while True:
                    next_type, _ = self.peek()
                    if next_type is None:
                        raise ZeusSyntaxError("Unexpected end of input in vector")
                    if next_type == "rbracket":
                        self.advance()
                        return Vector(items)
                    items.append(self.parse_expr())
            case "rparen":
                raise ZeusSyntaxError("Unexpected )")
            case "rbracket":
                raise ZeusSyntaxError("Unexpected ]")

        raise ZeusSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`.

    Empty (or comment-only) input reads as the empty list.
    """
    stream = TokenStream(lex(source))
    if stream.at_end():
        return []
    expr = stream.parse_expr()
    if not stream.at_end():
        raise ZeusSyntaxError("Extra tokens after expression")
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level expression of `source` in order."""
    return TokenStream(lex(source)).parse_all()
