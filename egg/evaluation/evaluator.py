"""Core tree-walking evaluator for the Egg interpreter.

Dispatches special forms by operator name before ordinary application;
everything else evaluates the operator, then the arguments left to right,
and hands off to the application engine.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.scope import Scope
from egg.types.syntax import Apply, Identifier, Node, Value
from egg.evaluation.apply import apply
from egg.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: Node, scope: Scope) -> EggValue:
    """Evaluate a syntax tree against `scope` and return its value."""
    match expr:
        case Value():
            return expr.raw

        case Identifier():
            return scope.lookup(expr.name)

        case Apply(operator=Identifier(name=name)) if name in SPECIAL_FORMS:
            # Special forms receive raw argument nodes and control evaluation order
            return SPECIAL_FORMS[name](list(expr.args), scope, evaluate)

        case Apply():
            head = evaluate(expr.operator, scope)
            args = [evaluate(arg, scope) for arg in expr.args]
            return apply(head, args)

    raise EggSyntaxError(f"Unknown expression type: {type(expr).__name__}")
