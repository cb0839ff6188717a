"""Builtin function table for the Zeus runtime environment.

``BUILTINS`` maps each builtin name to a Python callable ``fn(env, args)``
taking already-evaluated arguments. A builtin is referenced from Lisp code by
its Symbol: ``register`` binds every name to its own Symbol, so ``+``
evaluates to the symbol ``+`` and applying that symbol looks it up here.
"""
from __future__ import annotations

import logging
from typing import Callable

from zeus import LispValue
from zeus.types.environment import Environment
from zeus.types.symbol import Symbol, T
from zeus.builtin import arithmetic, char_builtin, collection_builtin
from zeus.builtin import higher_order, io_builtin, list_builtin, symbol_builtin

logger = logging.getLogger(__name__)

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]

BUILTINS: dict[str, BuiltinFn] = {
    # Arithmetic
    "+": arithmetic.add,
    "-": arithmetic.sub,
    "*": arithmetic.mul,
    "/": arithmetic.div,
    # Comparison
    "=": arithmetic.equals,
    "/=": arithmetic.not_equals,
    "<": arithmetic.lt,
    "<=": arithmetic.lte,
    ">": arithmetic.gt,
    ">=": arithmetic.gte,
    # Lists
    "list": list_builtin.list_builtin,
    "car": list_builtin.car,
    "cdr": list_builtin.cdr,
    "cons": list_builtin.cons,
    "append": list_builtin.append,
    "reverse": list_builtin.reverse,
    "length": list_builtin.length,
    "nth": list_builtin.nth,
    "nthcdr": list_builtin.nthcdr,
    "member": list_builtin.member,
    # Higher-order functions
    "mapcar": higher_order.mapcar,
    "filter": higher_order.filter_builtin,
    "remove": higher_order.remove,
    "reduce": higher_order.reduce,
    "apply": higher_order.apply,
    "funcall": higher_order.funcall,
    # I/O
    "print": io_builtin.print_builtin,
    "println": io_builtin.println_builtin,
    # Symbols
    "gensym": symbol_builtin.gensym,
    "get": symbol_builtin.get,
    "put": symbol_builtin.put,
    "symbol-plist": symbol_builtin.symbol_plist,
    # Vectors
    "vector": collection_builtin.vector,
    "make-vector": collection_builtin.make_vector,
    "vector-ref": collection_builtin.vector_ref,
    "vector-set!": collection_builtin.vector_set,
    "vector-length": collection_builtin.vector_length,
    # Hash tables
    "make-hash-table": collection_builtin.make_hash_table,
    "hash-set!": collection_builtin.hash_set,
    "hash-ref": collection_builtin.hash_ref,
    "hash-remove!": collection_builtin.hash_remove,
    "hash-keys": collection_builtin.hash_keys,
    # Characters
    "char=": char_builtin.char_equal,
    "char<": char_builtin.char_less,
    "char>": char_builtin.char_greater,
    "char->integer": char_builtin.char_to_integer,
    "integer->char": char_builtin.integer_to_char,
    # Type predicates
    **char_builtin.TYPE_PREDICATES,
}


def register(env: Environment) -> None:
    """Register all builtin names and constants into the given environment."""
    for name in BUILTINS:
        env.define(name, Symbol(name))
    env.define("t", T)
    env.define("nil", [])
    logger.debug("registered %d builtins", len(BUILTINS))
