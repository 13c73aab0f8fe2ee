"""Callable values for Egg.

Both functions created by the `fun` special form and host functions bound
into the global scope share one interface, so the evaluator applies them the
same way: check the arity contract, then call with evaluated arguments.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Callable as PyCallable, Optional, Sequence

from egg import EggValue
from egg.errors import EggTypeError
from egg.types.scope import Scope
from egg.types.syntax import Node

logger = logging.getLogger(__name__)


class Callable:
    """Base class for every value Egg can apply.

    `arity` is the exact number of arguments accepted, or None for variadic.
    """

    __slots__ = ("name", "arity")

    def __init__(self, name: str, arity: Optional[int]):
        self.name = name
        self.arity = arity

    def check_arity(self, args: Sequence[EggValue]) -> None:
        if self.arity is not None and len(args) != self.arity:
            raise EggTypeError(
                f"Wrong number of arguments to {self.name}: "
                f"expected {self.arity}, got {len(args)}"
            )

    def call(self, args: list[EggValue]) -> EggValue:
        raise NotImplementedError

    def __call__(self, *args: EggValue) -> EggValue:
        return self.call(list(args))


class Function(Callable):
    """A first-class function with parameters, body and closure scope."""

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: list[str], body: Node, scope: Scope):
        super().__init__("fun", len(params))
        self.params: list[str] = params
        self.body: Node = body
        self.scope: Scope = scope
        logger.debug("Function created: params=(%s)", ", ".join(params))

    def extend_scope(self, args: Sequence[EggValue]) -> Scope:
        """Bind arguments to parameters in a new child of the closure scope.

        The parent is the scope captured at definition, never the caller's.
        """
        self.check_arity(args)
        local = self.scope.child()
        for param, arg in zip(self.params, args):
            local.define(param, arg)
        return local

    def call(self, args: list[EggValue]) -> EggValue:
        # Late import: the evaluator imports the special forms, which build Functions
        from egg.evaluation.evaluator import evaluate
        return evaluate(self.body, self.extend_scope(args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fun(")
            buffer.write(", ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class HostFunction(Callable):
    """A Python implementation exposed to Egg code.

    `fn` receives the evaluated arguments as a list, matching the builtin
    calling convention in egg.builtin.env_builtin.
    """

    __slots__ = ("fn",)

    def __init__(
        self,
        name: str,
        fn: PyCallable[[list[EggValue]], EggValue],
        arity: Optional[int] = None,
    ):
        super().__init__(name, arity)
        self.fn = fn

    def call(self, args: list[EggValue]) -> EggValue:
        self.check_arity(args)
        return self.fn(args)

    def __str__(self) -> str:
        return f"<host {self.name}>"

    def __repr__(self) -> str:
        return str(self)
