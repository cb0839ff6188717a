"""Vector and hash-table builtins.

Both collections are copy-on-write: ``vector-set!``, ``hash-set!`` and
``hash-remove!`` return a new collection and leave their argument untouched,
despite the ``!`` in their names.
"""
from __future__ import annotations

from zeus import LispValue
from zeus.types.cons import Vector
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusError, ZeusIndexError, ZeusTypeError
from zeus.types.expr import is_integer
from zeus.types.hash_table import HashTable, to_hash_key


def _expect_args(name: str, args: list[LispValue], *counts: int) -> list[LispValue]:
    if len(args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise ZeusArityError(f"{name} requires {expected} arguments")
    return args


def _vector_arg(name: str, value: LispValue) -> Vector:
    if not isinstance(value, Vector):
        raise ZeusTypeError(f"{name} requires a vector")
    return value


def _vector_index(name: str, vec: Vector, index: LispValue) -> int:
    if not is_integer(index):
        raise ZeusTypeError(f"{name} index must be an integer")
    if not 0 <= index < len(vec):
        raise ZeusIndexError(f"{name} index {index} out of bounds for length {len(vec)}")
    return index


def _table_arg(name: str, value: LispValue) -> HashTable:
    if not isinstance(value, HashTable):
        raise ZeusTypeError(f"{name} requires a hash table")
    return value


# -------------------------------
# Vectors
# -------------------------------
def vector(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


def make_vector(env: Environment, args: list[LispValue]) -> Vector:
    """(make-vector size [fill]) - fill defaults to nil."""
    _expect_args("make-vector", args, 1, 2)
    size = args[0]
    if not is_integer(size) or size < 0:
        raise ZeusTypeError("make-vector size must be a non-negative integer")
    fill = args[1] if len(args) == 2 else []
    return Vector([fill] * size)


def vector_ref(env: Environment, args: list[LispValue]) -> LispValue:
    vec, index = _expect_args("vector-ref", args, 2)
    vec = _vector_arg("vector-ref", vec)
    return vec[_vector_index("vector-ref", vec, index)]


def vector_set(env: Environment, args: list[LispValue]) -> Vector:
    """(vector-set! vec index value) - a new vector with one element replaced."""
    vec, index, value = _expect_args("vector-set!", args, 3)
    vec = _vector_arg("vector-set!", vec)
    return vec.set(_vector_index("vector-set!", vec, index), value)


def vector_length(env: Environment, args: list[LispValue]) -> int:
    (vec,) = _expect_args("vector-length", args, 1)
    return len(_vector_arg("vector-length", vec))


# -------------------------------
# Hash tables
# -------------------------------
def make_hash_table(env: Environment, args: list[LispValue]) -> HashTable:
    _expect_args("make-hash-table", args, 0)
    return HashTable()


def hash_set(env: Environment, args: list[LispValue]) -> HashTable:
    """(hash-set! table key value) - a new table with key bound to value."""
    table, key, value = _expect_args("hash-set!", args, 3)
    return _table_arg("hash-set!", table).set(to_hash_key(key), value)


def hash_ref(env: Environment, args: list[LispValue]) -> LispValue:
    """(hash-ref table key [default]) - errors on a missing key without default."""
    _expect_args("hash-ref", args, 2, 3)
    table = _table_arg("hash-ref", args[0])
    key = to_hash_key(args[1])
    if key in table:
        return table.get(key)
    if len(args) == 3:
        return args[2]
    raise ZeusError("Key not found")


def hash_remove(env: Environment, args: list[LispValue]) -> HashTable:
    table, key = _expect_args("hash-remove!", args, 2)
    return _table_arg("hash-remove!", table).remove(to_hash_key(key))


def hash_keys(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Keys in insertion order."""
    (table,) = _expect_args("hash-keys", args, 1)
    return _table_arg("hash-keys", table).keys()
