from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.scope import Scope
from egg.types.syntax import Node


def while_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    """
    while(cond, body)
    Runs body for as long as cond is not false. There is no step limit; a
    condition that never becomes false blocks the caller.
    """
    if len(args) != 2:
        raise EggSyntaxError("Wrong number of args to while")

    cond, body = args
    while evaluate_fn(cond, scope) is not False:
        evaluate_fn(body, scope)

    # Everything is an expression, but a loop has no useful result
    return False
