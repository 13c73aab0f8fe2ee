from __future__ import annotations

from typing import Any

from egg import EggValue
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.syntax import Apply, Identifier, Node, Value

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_IDENTIFIER = "\033[94m"
COLOR_STRING = "\033[92m"
COLOR_NUMBER = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "indent": 2,
    "color": False,
}


# ----------------- Source form -----------------
def to_source(node: Node) -> str:
    """Serialize a tree back to single-line Egg source.

    parse(to_source(tree)) == tree for every tree the reader produces.
    """
    if isinstance(node, Value):
        if isinstance(node.raw, str):
            return f'"{node.raw}"'
        return str(node.raw)
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, Apply):
        args = ", ".join(to_source(a) for a in node.args)
        return f"{to_source(node.operator)}({args})"
    raise TypeError(f"Not an Egg syntax node: {node!r}")


def colorize(node: Value | Identifier, options: dict = DEFAULT_OPTIONS) -> str:
    text = to_source(node)
    if not options.get("color", False):
        return text
    if isinstance(node, Identifier):
        color = COLOR_SPECIAL_FORM if node.name in SPECIAL_FORMS else COLOR_IDENTIFIER
    elif isinstance(node.raw, str):
        color = COLOR_STRING
    else:
        color = COLOR_NUMBER
    return f"{color}{text}{RESET}"


# ----------------- Pretty printer -----------------
def pformat(node: Node, options: dict = DEFAULT_OPTIONS, _level: int = 0) -> str:
    """Render a tree as indented Egg source.

    Applications that fit within max_line_length stay on one line; longer ones
    put each argument on its own line. With color disabled the output parses
    back to the same tree.
    """
    options = {**DEFAULT_OPTIONS, **options}
    if not isinstance(node, Apply):
        return colorize(node, options)

    step = " " * options["indent"]
    pad = step * _level
    head = pformat(node.operator, options, _level)
    flat = to_source(node)
    if len(pad) + len(flat) <= options["max_line_length"] or not node.args:
        if options["color"]:
            args = ", ".join(pformat(a, options, _level) for a in node.args)
            return f"{head}({args})"
        return flat

    parts = [step * (_level + 1) + pformat(a, options, _level + 1) for a in node.args]
    return f"{head}(\n" + ",\n".join(parts) + ")"


# ----------------- Plain-data tree -----------------
def to_tree(node: Node) -> dict[str, Any]:
    """Convert a tree into nested dicts, e.g. for JSON dumping."""
    if isinstance(node, Value):
        return {"type": "value", "value": node.raw}
    if isinstance(node, Identifier):
        return {"type": "identifier", "name": node.name}
    if isinstance(node, Apply):
        return {
            "type": "apply",
            "operator": to_tree(node.operator),
            "args": [to_tree(a) for a in node.args],
        }
    raise TypeError(f"Not an Egg syntax node: {node!r}")


# ----------------- Runtime values -----------------
def display(value: EggValue) -> str:
    """How `print` shows a runtime value."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, list):
        return "[" + ", ".join(display(v) for v in value) + "]"
    return str(value)
