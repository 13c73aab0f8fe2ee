from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.scope import Scope
from egg.types.syntax import Identifier, Node


def set_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    if len(args) != 2 or not isinstance(args[0], Identifier):
        raise EggSyntaxError("Incorrect use of set")
    name, val_expr = args
    value = evaluate_fn(val_expr, scope)
    scope.set(name.name, value)

    return value
