"""Syntax tree nodes produced by the Egg reader.

There are exactly three kinds of node:

    - Value       a string or number literal
    - Identifier  a reference to a binding
    - Apply       an application of an operator node to argument nodes

Nodes are immutable and compare structurally, so a tree that is printed and
read back compares equal to the tree it came from.
"""

from __future__ import annotations

from typing import Union


class Value:
    __slots__ = ("raw",)

    def __init__(self, raw: str | int | float):
        object.__setattr__(self, "raw", raw)

    def __setattr__(self, key, value):
        raise AttributeError("Value nodes are immutable")

    def __eq__(self, other: object) -> bool:
        # 1 == True in Python; literals only ever hold str/int so compare types too
        return (
            isinstance(other, Value)
            and type(self.raw) is type(other.raw)
            and self.raw == other.raw
        )

    def __hash__(self) -> int:
        return hash((Value, type(self.raw), self.raw))

    def __repr__(self):
        return f"Value({self.raw!r})"


class Identifier:
    __slots__ = ("name",)

    def __init__(self, name: str):
        object.__setattr__(self, "name", name)

    def __setattr__(self, key, value):
        raise AttributeError("Identifier nodes are immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Identifier, self.name))

    def __repr__(self):
        return f"Identifier({self.name!r})"

    def __str__(self):
        return self.name


class Apply:
    __slots__ = ("operator", "args")

    def __init__(self, operator: Node, args=()):
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "args", tuple(args))

    def __setattr__(self, key, value):
        raise AttributeError("Apply nodes are immutable")

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Apply)
            and self.operator == other.operator
            and self.args == other.args
        )

    def __hash__(self) -> int:
        return hash((Apply, self.operator, self.args))

    def __repr__(self):
        args = ", ".join(repr(a) for a in self.args)
        return f"Apply({self.operator!r}, [{args}])"


Node = Union[Value, Identifier, Apply]
