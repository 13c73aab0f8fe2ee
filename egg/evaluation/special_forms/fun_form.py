from egg import EggValue, EvaluatorFn
from egg.errors import EggSyntaxError
from egg.types.function import Function
from egg.types.scope import Scope
from egg.types.syntax import Identifier, Node


def fun_form(args: list[Node], scope: Scope, evaluate_fn: EvaluatorFn) -> EggValue:
    # fun(a, b, body): every argument but the last names a parameter.
    # The current scope is captured as the parent of each call's scope.
    if not args:
        raise EggSyntaxError("Functions need a body")

    *param_nodes, body = args
    params: list[str] = []
    for node in param_nodes:
        if not isinstance(node, Identifier):
            raise EggSyntaxError("Parameter names must be words")
        params.append(node.name)

    return Function(params, body, scope)
