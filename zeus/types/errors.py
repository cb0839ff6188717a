"""Error and non-local exit classes for Zeus.

Two families share one channel: ``ZeusError`` subclasses are ordinary
failures, ``ControlSignal`` subclasses are non-local exits that a matching
enclosing form (catch, block, tagbody) consumes.
"""

from __future__ import annotations

from typing import Any


class EvalError(Exception):
    """ Base class for everything evaluation can raise"""
    pass


class ZeusError(EvalError):
    """ Base class for all Zeus errors"""
    pass


class ZeusSyntaxError(ZeusError):
    """ Raised when source text cannot be lexed or read"""


class ZeusInvalidSymbol(ZeusError):
    """ Raised when an invalid symbol is used"""
    pass


class ZeusUnboundSymbol(ZeusError):
    """ Raised when a symbol is used before it is bound"""
    pass


class ZeusArityError(ZeusError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ZeusTypeError(ZeusError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class ZeusIndexError(ZeusError):
    """ Raised when an index is outside a list or vector"""


class ZeusDivisionByZero(ZeusError):
    """ Raised when dividing by zero"""


class ControlSignal(EvalError):
    """ Base class for non-local exits (throw, return-from, go)"""

    def describe(self) -> str:
        raise NotImplementedError


class ThrowSignal(ControlSignal):
    """Raised by (throw tag value); consumed by a catch with an equal tag."""

    def __init__(self, tag: Any, value: Any):
        self.tag: Any = tag
        self.value: Any = value
        super().__init__(self.describe())

    def describe(self) -> str:
        from zeus.printer import format_expr
        return f"Uncaught throw for tag {format_expr(self.tag)}"


class ReturnFromSignal(ControlSignal):
    """Raised by (return-from name value); consumed by the block called name."""

    def __init__(self, name: str, value: Any):
        self.name: str = name
        self.value: Any = value
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Unhandled return-from for block {self.name}"


class GoSignal(ControlSignal):
    """Raised by (go label); consumed by the tagbody holding that label."""

    def __init__(self, label: str):
        self.label: str = label
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Unhandled go to label {self.label}"
