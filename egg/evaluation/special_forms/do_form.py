from egg import EggValue, EvaluatorFn
from egg.types.scope import Scope
from egg.types.syntax import Node


def do_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    value: EggValue = False
    for arg in args:
        value = evaluate_fn(arg, scope)
    return value
