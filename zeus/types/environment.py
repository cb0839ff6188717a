"""Runtime environment for Zeus.

The Environment keeps a stack of scopes mapping names to evaluated Lisp
values. The bottom scope holds builtins and top-level definitions and is never
popped. Functions do not capture scopes: a lambda body resolves free names
against whatever stack is live when it is called.

Besides bindings, the Environment owns the symbol property store used by
get/put/symbol-plist and the counter behind gensym.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from itertools import count
from typing import Iterator

from zeus import LispValue
from zeus.types.errors import ZeusUnboundSymbol
from zeus.types.symbol import GenSym, Keyword


class Environment:
    """Scope stack, symbol property lists and the gensym counter of one session."""

    __slots__ = (
        "scopes",
        "properties",
        "_gensym_counter",
        "_uids",
    )

    def __init__(self):
        self.scopes: list[dict[str, LispValue]] = [{}]
        self.properties: dict[str, dict[str, LispValue]] = {}
        self._gensym_counter: int = 1
        # Identity of uninterned symbols, independent of counter resets
        self._uids = count(1)

    # --- Scopes ---
    def push_scope(self) -> None:
        self.scopes.append({})

    def pop_scope(self) -> None:
        """Drop the innermost scope; the base scope always stays."""
        if len(self.scopes) > 1:
            self.scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Push a scope for the duration of the block, popping it on every exit path."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` in the innermost scope, shadowing outer bindings."""
        self.scopes[-1][name] = value

    def lookup(self, name: str) -> LispValue:
        """Look up `name` from the innermost scope outwards.

        Raises ZeusUnboundSymbol if no scope binds it.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise ZeusUnboundSymbol(f"Undefined variable: {name}")

    def is_bound(self, name: str) -> bool:
        return any(name in scope for scope in self.scopes)

    def names(self) -> list[str]:
        """Every visible binding name, innermost shadowing outer, sorted."""
        seen: set[str] = set()
        for scope in self.scopes:
            seen.update(scope)
        return sorted(seen)

    # --- Symbol properties ---
    def get_property(self, symbol: str, prop: str) -> LispValue:
        """Value of `prop` on `symbol`, or nil when unset."""
        return self.properties.get(symbol, {}).get(prop, [])

    def put_property(self, symbol: str, prop: str, value: LispValue) -> LispValue:
        self.properties.setdefault(symbol, {})[prop] = value
        return value

    def symbol_plist(self, symbol: str) -> list[LispValue]:
        """Flat (:prop value ...) list in insertion order."""
        plist: list[LispValue] = []
        for prop, value in self.properties.get(symbol, {}).items():
            plist.append(Keyword(prop))
            plist.append(value)
        return plist

    # --- Symbol generation ---
    def gen_sym(self, prefix: str = "G", reset: int | None = None) -> GenSym:
        """Mint a fresh uninterned symbol named prefix + counter.

        With `reset`, the counter is set to that value first, giving
        deterministic names; identities stay unique regardless.
        """
        if reset is not None:
            self._gensym_counter = reset
        name = f"{prefix}{self._gensym_counter}"
        self._gensym_counter += 1
        return GenSym(name, next(self._uids))

    # --- Display ---
    def _write_vars(self, buffer: StringIO, scope: dict[str, LispValue]) -> None:
        """Write one scope's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in scope.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope with an indicator for the scopes below it."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.scopes[-1])
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment scopes: ")
            chain = []
            for scope in reversed(self.scopes):
                env_buf = StringIO()
                self._write_vars(env_buf, scope)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
