from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.scope import Scope
from egg.types.syntax import Identifier, Node


def define_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    """
    define(name, value)
    Binds name in the innermost scope, shadowing any outer binding.
    """
    if len(args) != 2 or not isinstance(args[0], Identifier):
        raise EggSyntaxError("Incorrect use of define")

    name, val_expr = args
    value = evaluate_fn(val_expr, scope)
    scope.define(name.name, value)
    return value
