"""Error kinds raised by the Egg parser and evaluator.

All three kinds are raised where they are detected and propagate unchanged;
the interpreter never recovers from them locally.
"""

from __future__ import annotations


class EggError(Exception):
    """ Base class for all Egg errors"""
    pass


class EggSyntaxError(EggError):
    """ Raised on malformed source text or a malformed special-form shape"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class EggReferenceError(EggError):
    """ Raised when a binding cannot be found in any enclosing scope"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class EggTypeError(EggError):
    """ Raised when applying a non-function or calling with the wrong arity"""


class EggRecursionError(EggError):
    """ Raised when a program nests calls deeper than the host stack allows"""
