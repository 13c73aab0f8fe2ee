"""Lexical scopes for Egg.

A Scope stores bindings of names to evaluated values and links to the
enclosing scope via `outer`. The global scope is the root of every chain and
has no parent. Lookups and `set` walk the chain outward; `define` only ever
touches the innermost scope.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from egg import EggValue
from egg.errors import EggReferenceError


class Scope:
    """Hierarchical mapping from binding names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Scope | None = outer

    def child(self) -> Scope:
        """Return a fresh, empty scope whose parent is this one."""
        return Scope(outer=self)

    def define(self, name: str, value: EggValue) -> None:
        """Bind `name` to `value` in this scope, creating or overwriting it."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that directly owns `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def set(self, name: str, value: EggValue) -> None:
        """Update an existing binding for `name` in the scope chain.

        Raises EggReferenceError if no scope in the chain owns `name`;
        unlike `define`, this never creates a binding.
        """
        scope = self.find(name)
        if scope is None:
            raise EggReferenceError(f"Could not find {name} in any scope", name)
        scope.vars[name] = value

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, searching outward.

        Raises EggReferenceError if `name` is unbound in every scope.
        """
        scope = self.find(name)
        if scope is None:
            raise EggReferenceError(f"Undefined binding: {name}", name)
        return scope.vars[name]

    def update(self, mapping: Mapping[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    def chain(self) -> Iterator[Scope]:
        """Yield this scope followed by each enclosing scope up to the root."""
        scope: Optional[Scope] = self
        while scope is not None:
            yield scope
            scope = scope.outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        frames = []
        for scope in self.chain():
            with StringIO() as frame:
                scope._write_vars(frame)
                frames.append(frame.getvalue())
        return "<Scope chain: " + " -> ".join(frames) + ">"
