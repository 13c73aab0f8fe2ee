from __future__ import annotations

import logging

from egg import EggValue, OutputFn
from egg.errors import EggRecursionError
from egg.reader.parser import parse
from egg.evaluation.evaluator import evaluate
from egg.types.scope import Scope
from egg.types.syntax import Node
from egg.builtin.env_builtin import make_global_scope

logger = logging.getLogger(__name__)


def evaluate_program(tree: Node, scope: Scope) -> EggValue:
    """Evaluate a whole program, reporting stack exhaustion as an Egg error.

    Each Egg call nests a handful of Python frames, so deep non-tail
    recursion can outrun the interpreter stack; that surfaces as
    EggRecursionError instead of a bare RecursionError.
    """
    try:
        return evaluate(tree, scope)
    except RecursionError as exc:
        raise EggRecursionError("Maximum call depth exceeded") from exc


def run(source: str, global_scope: Scope) -> EggValue:
    """Parse `source` once and evaluate it in a fresh child of `global_scope`.

    Top-level defines land in the child, so independent runs never see each
    other's bindings.
    """
    tree = parse(source)
    logger.debug("Running program (%d chars)", len(source))
    return evaluate_program(tree, global_scope.child())


class Interpreter:
    """
    Owns one global scope and runs Egg programs against fresh children of it.
    The global scope is built once and shared by every run.
    """

    def __init__(self, output: OutputFn | None = None, global_scope: Scope | None = None):
        if global_scope is None:
            global_scope = make_global_scope(output)
        self.global_scope: Scope = global_scope

    def parse(self, source: str) -> Node:
        return parse(source)

    def evaluate(self, tree: Node, scope: Scope | None = None) -> EggValue:
        if scope is None:
            scope = self.global_scope.child()
        return evaluate_program(tree, scope)

    def run(self, source: str) -> EggValue:
        return run(source, self.global_scope)

    def run_example(self, name: str) -> EggValue:
        from egg.modules.example_loader import load_example
        return self.run(load_example(name))


#  Example use-age:
if __name__ == "__main__":
    from egg.modules.example_loader import list_examples

    interp = Interpreter()
    for name in list_examples():
        print(name, "=>", interp.run_example(name))
