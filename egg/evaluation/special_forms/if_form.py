from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.scope import Scope
from egg.types.syntax import Node


def if_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    if len(args) != 3:
        raise EggSyntaxError("Wrong number of args to if")

    # Only the boolean false selects the else branch; 0 and "" are true
    if evaluate_fn(args[0], scope) is not False:
        return evaluate_fn(args[1], scope)
    return evaluate_fn(args[2], scope)
