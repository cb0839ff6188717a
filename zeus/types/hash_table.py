"""Copy-on-write hash tables.

A HashTable never changes after construction. ``set`` and ``remove`` take a
snapshot of the entry mapping and return a new table; the stored values are
shared between the old and new tables.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from zeus import LispValue
from zeus.types.character import Character
from zeus.types.errors import ZeusTypeError
from zeus.types.symbol import Keyword, Symbol

HashKey = int | str | Symbol | Keyword | Character


def to_hash_key(expr: LispValue) -> HashKey:
    """Project an expression onto the hashable key subset or raise."""
    if isinstance(expr, (str, Symbol, Keyword, Character)):
        return expr
    if isinstance(expr, int) and not isinstance(expr, bool):
        return expr
    from zeus.printer import format_expr
    raise ZeusTypeError(f"Invalid hash key: {format_expr(expr)}")


class HashTable:
    __slots__ = ("_entries",)

    def __init__(self, entries: dict[HashKey, LispValue] | None = None):
        self._entries: dict[HashKey, LispValue] = entries if entries is not None else {}

    def get(self, key: HashKey, default: LispValue = None) -> LispValue:
        return self._entries.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def set(self, key: HashKey, value: LispValue) -> HashTable:
        entries = dict(self._entries)
        entries[key] = value
        return HashTable(entries)

    def remove(self, key: HashKey) -> HashTable:
        if key not in self._entries:
            return self
        entries = dict(self._entries)
        del entries[key]
        return HashTable(entries)

    def keys(self) -> list[HashKey]:
        return list(self._entries)

    def items(self):
        return self._entries.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HashKey]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashTable):
            return NotImplemented
        from zeus.types.expr import structurally_equal
        return structurally_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("HashTable({")
            first = True
            for k, v in self._entries.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k!r}: {v!r}")
                first = False
            buffer.write("})")
            return buffer.getvalue()
