"""
  Egg Reader

- Recursive-descent over the raw source text, tracking an offset
- Emits the immutable nodes from egg.types.syntax:

    - "..."          -> Value(str)    no escape sequences
    - digits         -> Value(int)    must end at a word boundary
    - anything else  -> Identifier    may not begin with a digit
    - expr(a, b, ..) -> Apply(expr, [a, b, ..])   chains: f(a)(b)

  Whitespace is the only thing skipped between tokens. `#` ends an
  identifier but does not start a comment.
"""

from __future__ import annotations

import re

from egg.errors import EggSyntaxError
from egg.types.syntax import Apply, Identifier, Node, Value


SPACE_RE = re.compile(r"\s*")
STRING_RE = re.compile(r'"([^"]*)"')
NUMBER_RE = re.compile(r"\d+\b")
IDENTIFIER_RE = re.compile(r'(?!\d)[^\s(),#"]+')

# Characters of source quoted back in error messages
_CONTEXT = 20


class Reader:
    """Cursor over a single Egg source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def skip_space(self) -> None:
        self.pos = SPACE_RE.match(self.source, self.pos).end()

    def peek(self) -> str:
        self.skip_space()
        return self.source[self.pos : self.pos + 1]

    def at_end(self) -> bool:
        return self.peek() == ""

    def _error(self, message: str) -> EggSyntaxError:
        snippet = self.source[self.pos : self.pos + _CONTEXT]
        if snippet:
            message = f"{message}: {snippet!r}"
        return EggSyntaxError(message, self.pos)

    def parse_expression(self) -> Node:
        self.skip_space()
        if m := STRING_RE.match(self.source, self.pos):
            expr: Node = Value(m.group(1))
        elif m := NUMBER_RE.match(self.source, self.pos):
            expr = Value(int(m.group(0)))
        elif m := IDENTIFIER_RE.match(self.source, self.pos):
            expr = Identifier(m.group(0))
        else:
            raise self._error("Unexpected syntax")
        self.pos = m.end()
        return self.parse_apply(expr)

    def parse_apply(self, expr: Node) -> Node:
        """Wrap `expr` in one Apply per trailing argument list."""
        while self.peek() == "(":
            self.pos += 1
            args: list[Node] = []
            while self.peek() != ")":
                if self.at_end():
                    raise self._error("Expected ')' before end of program")
                args.append(self.parse_expression())
                nxt = self.peek()
                if nxt == ",":
                    self.pos += 1
                elif nxt != ")":
                    raise self._error("Expected ',' or ')'")
            self.pos += 1
            expr = Apply(expr, args)
        return expr


def parse(source: str) -> Node:
    """Turn an Egg program into a syntax tree.

    The program must be exactly one expression; any trailing non-whitespace
    text raises EggSyntaxError.
    """
    reader = Reader(source)
    expr = reader.parse_expression()
    if not reader.at_end():
        raise reader._error("Unexpected text after program")
    return expr
