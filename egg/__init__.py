# Core type aliases for Egg's data model.
# Syntax trees are built from the node classes in egg.types.syntax; runtime
# values are plain Python values (bool, int/float, str, list) plus the
# callables defined in egg.types.function.
#
# Naming guidance:
# - Node:      syntactic forms produced by the reader (see egg.types.syntax).
# - EggValue:  evaluated runtime values flowing through the evaluator.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: passed into special forms so they can evaluate
# their own argument nodes in whatever order they choose
EvaluatorFn = Callable[..., EggValue]

# Output channel used by the `print` host binding
OutputFn = Callable[[str], None]

from egg.errors import EggError, EggSyntaxError, EggReferenceError, EggTypeError, EggRecursionError  # noqa: E402
from egg.reader.parser import parse  # noqa: E402
from egg.evaluation.evaluator import evaluate  # noqa: E402
from egg.builtin.env_builtin import make_global_scope  # noqa: E402
from egg.interpreter import Interpreter, run  # noqa: E402

__all__ = [
    "EggValue",
    "EvaluatorFn",
    "OutputFn",
    "EggError",
    "EggSyntaxError",
    "EggReferenceError",
    "EggTypeError",
    "EggRecursionError",
    "parse",
    "evaluate",
    "make_global_scope",
    "Interpreter",
    "run",
]
