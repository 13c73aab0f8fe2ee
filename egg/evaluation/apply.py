"""Application engine for Egg.

Centralizes the one rule every non-special application follows: the
operator value must be an Egg callable, its arity contract is checked, and it
is invoked with the already-evaluated arguments. Egg-defined functions and
host functions go through the same path, `Callable.call`.
"""

from egg import EggValue
from egg.errors import EggTypeError
from egg.types.function import Callable


def apply(head: object, args: list[EggValue]) -> EggValue:
    """Apply a Function or a host callable.

    Raises EggTypeError for anything that is not an Egg callable.
    """
    if not isinstance(head, Callable):
        raise EggTypeError(f"Applying a non-function: {head!r}")
    return head.call(args)
