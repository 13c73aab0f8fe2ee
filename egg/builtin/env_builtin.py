"""Built-in bindings for the Egg global scope.

This module defines the boolean constants, the binary arithmetic and
comparison operators, `print`, and the array helpers, and installs them into
a scope. The global scope is built by the host and passed to every run; there
is no module-level singleton.
"""
from __future__ import annotations

import operator
from typing import Any, Callable as PyCallable

from egg import EggValue, OutputFn
from egg.debug_utils.pprint import display
from egg.errors import EggTypeError
from egg.types.function import HostFunction
from egg.types.scope import Scope


def _is_number(value: Any) -> bool:
    # bool is an int subclass in Python but not a number in Egg
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


# -------------------------------
# Arithmetic
# -------------------------------
def _numeric(name: str, op: PyCallable[[Any, Any], Any]) -> PyCallable[[list[EggValue]], EggValue]:
    def impl(args: list[EggValue]) -> EggValue:
        a, b = args
        if not (_is_number(a) and _is_number(b)):
            raise EggTypeError(
                f"Arguments to {name} must be numbers, got {_kind(a)} and {_kind(b)}"
            )
        return op(a, b)

    return impl


def add(args: list[EggValue]) -> EggValue:
    """Sum two numbers, or concatenate two strings."""
    a, b = args
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    return _numeric("+", operator.add)(args)


def div(args: list[EggValue]) -> EggValue:
    """Divide two numbers; exact integer quotients stay integers."""
    a, b = args
    if not (_is_number(a) and _is_number(b)):
        raise EggTypeError(
            f"Arguments to / must be numbers, got {_kind(a)} and {_kind(b)}"
        )
    if b == 0:
        raise EggTypeError("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[EggValue]) -> bool:
    """Strict equality: values of different kinds are never equal."""
    a, b = args
    kind = _kind(a)
    if kind != _kind(b):
        return False
    if kind in ("boolean", "number", "string"):
        return a == b
    # arrays and functions compare by identity
    return a is b


def _ordering(name: str, op: PyCallable[[Any, Any], bool]) -> PyCallable[[list[EggValue]], bool]:
    def impl(args: list[EggValue]) -> bool:
        a, b = args
        if _is_number(a) and _is_number(b):
            return op(a, b)
        if isinstance(a, str) and isinstance(b, str):
            return op(a, b)
        raise EggTypeError(
            f"Cannot compare {_kind(a)} and {_kind(b)} with {name}"
        )

    return impl


# -------------------------------
# Arrays
# -------------------------------
def array(args: list[EggValue]) -> list[EggValue]:
    return list(args)


def length(args: list[EggValue]) -> int:
    (seq,) = args
    if not isinstance(seq, (list, str)):
        raise EggTypeError(f"length requires an array or string, got {_kind(seq)}")
    return len(seq)


def element(args: list[EggValue]) -> EggValue:
    seq, index = args
    if not isinstance(seq, (list, str)):
        raise EggTypeError(f"element requires an array or string, got {_kind(seq)}")
    if not isinstance(index, int) or isinstance(index, bool):
        raise EggTypeError(f"element index must be an integer, got {_kind(index)}")
    if not 0 <= index < len(seq):
        raise EggTypeError(f"Index {index} out of range for length {len(seq)}")
    return seq[index]


# -------------------------------
# Output
# -------------------------------
def make_print(output: OutputFn) -> PyCallable[[list[EggValue]], EggValue]:
    """Build `print`, writing the display form of its argument to `output`."""

    def print_value(args: list[EggValue]) -> EggValue:
        (value,) = args
        output(display(value))
        return value

    return print_value


def _stdout(text: str) -> None:
    print(text)


# -------------------------------
# Registration
# -------------------------------
def register(scope: Scope, output: OutputFn | None = None) -> None:
    """Install every host binding into `scope`."""
    scope.update({
        "true": True,
        "false": False,
        "+": HostFunction("+", add, 2),
        "-": HostFunction("-", _numeric("-", operator.sub), 2),
        "*": HostFunction("*", _numeric("*", operator.mul), 2),
        "/": HostFunction("/", div, 2),
        "==": HostFunction("==", equals, 2),
        "<": HostFunction("<", _ordering("<", operator.lt), 2),
        ">": HostFunction(">", _ordering(">", operator.gt), 2),
        "print": HostFunction("print", make_print(output or _stdout), 1),
        "array": HostFunction("array", array),
        "length": HostFunction("length", length, 1),
        "element": HostFunction("element", element, 2),
    })


def make_global_scope(output: OutputFn | None = None) -> Scope:
    """Create a global scope holding the host bindings.

    `output` receives each line `print` produces; it defaults to stdout.
    """
    scope = Scope()
    register(scope, output)
    return scope
