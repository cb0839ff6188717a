from __future__ import annotations
import sys


class Symbol:
    """An interned symbol: equal to every other Symbol with the same name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is Symbol and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Keyword:
    """A self-evaluating :name symbol. Never bound, defined or used as a parameter."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is Keyword and self.name == other.name

    def __hash__(self) -> int:
        return hash((":", self.name))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return f":{self.name}"


class GenSym:
    """An uninterned symbol minted by gensym.

    Carries a numeric identity besides its name and is only ever equal to
    itself, even when another GenSym shares its name.
    """

    __slots__ = ("name", "uid")

    def __init__(self, name: str, uid: int):
        self.name = name
        self.uid = uid

    def __eq__(self, other: object) -> bool:
        return type(other) is GenSym and self.uid == other.uid

    def __hash__(self) -> int:
        return hash(("#:", self.uid))

    def __repr__(self):
        return f"GenSym({self.name!r}, {self.uid})"

    def __str__(self):
        return f"#:{self.name}"


SymbolData = Symbol | Keyword | GenSym

LAMBDA = Symbol("lambda")
PROGN = Symbol("progn")
QUOTE = Symbol("quote")
T = Symbol("t")
