# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""Small arithmetic expressions over dates, times and durations.

An expression is given as a stream of tokens: strings are expression text
(operators, parentheses and whitespace), anything else is an operand value.

>>> dtexpr(Date(2021, 1, 2), " - ", Duration(days=1), " > ", Date(2020, 1, 1))
True

Grammar, from lowest to highest precedence::

    expr     := poly (('<=' | '<' | '==' | '!=' | '>=' | '>') expr)?
    poly     := negterm (('+' | '-') poly)?
    negterm  := '-' realexpr | realexpr
    realexpr := '(' poly ')' | PLACEHOLDER

Both the comparison and the ``+``/``-`` rules are right-associative:
``a - b - c`` means ``a - (b - c)``.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Sequence, Tuple, Union

from . import (
    TemporalError,
    TemporalTypeError,
    TemporalValueError,
    add,
    cmp,
    neg,
    sub,
)

__all__ = [
    "ExpressionError",
    "ExpressionSyntaxError",
    "ExpressionExecutionError",
    "Placeholder",
    "Expression",
    "ExpressionEvaluator",
    "parse",
    "dtexpr",
]

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"
_PLACEHOLDER_TEXT = "{...}"

# (index into the token list, character offset within a text token)
Position = Tuple[int, int]


class Placeholder:
    """Stands in for the operand at ``index`` in an expression's shape"""

    __slots__ = ("index",)

    def __init__(self, index: int) -> None:
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placeholder):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash((Placeholder, self.index))

    def __repr__(self) -> str:
        return f"Placeholder({self.index})"


Token = Union[str, Placeholder]
Shape = Tuple[Token, ...]


class ExpressionError(TemporalError):
    """Base class of errors in parsing or evaluating an expression.

    ``str()`` shows the expression text with a caret under the
    offending position. Operands are shown as ``{...}``.
    """

    def __init__(self, tokens: Sequence[Token], pos: Position, message: str):
        super().__init__(message)
        self.tokens = tuple(tokens)
        self.pos = pos
        self.message = message

    def text(self) -> str:
        """The expression text, with operands shown as ``{...}``"""
        return "".join(_token_text(t) for t in self.tokens)

    def column(self) -> int:
        """The character offset of the error within :meth:`text`"""
        index, offset = self.pos
        return sum(len(_token_text(t)) for t in self.tokens[:index]) + offset

    def __str__(self) -> str:
        return f"{self.message}\n{self.text()}\n{' ' * self.column()}^"


class ExpressionSyntaxError(ExpressionError):
    """The expression text is malformed"""


class ExpressionExecutionError(ExpressionError):
    """Evaluating an operator failed, for example because the operand
    types can't be combined. The error raised by the operation is kept in
    :attr:`original_error`."""

    def __init__(
        self,
        tokens: Sequence[Token],
        pos: Position,
        message: str,
        original_error: Exception | None = None,
    ):
        super().__init__(tokens, pos, message)
        self.original_error = original_error

    def __str__(self) -> str:
        s = super().__str__()
        if self.original_error is not None:
            s += f"\nOriginal error: {self.original_error!r}"
        return s


def _token_text(token: Token) -> str:
    return token if isinstance(token, str) else _PLACEHOLDER_TEXT


class _Context:
    __slots__ = ("tokens", "values")

    def __init__(self, tokens: Shape, values: Sequence[Any]) -> None:
        self.tokens = tokens
        self.values = values


class Node:
    """A node in the syntax tree of an expression"""

    __slots__ = ("pos",)

    def __init__(self, pos: Position) -> None:
        self.pos = pos

    def execute(self, context: _Context) -> Any:
        raise NotImplementedError()


class VariableNode(Node):
    __slots__ = ("index",)

    def __init__(self, index: int, pos: Position) -> None:
        super().__init__(pos)
        self.index = index

    def execute(self, context: _Context) -> Any:
        if self.index >= len(context.values):
            raise ExpressionExecutionError(
                context.tokens,
                self.pos,
                f"No value given for operand {self.index}",
            )
        return context.values[self.index]


class NegNode(Node):
    __slots__ = ("operand",)

    def __init__(self, operand: Node, pos: Position) -> None:
        super().__init__(pos)
        self.operand = operand

    def execute(self, context: _Context) -> Any:
        value = self.operand.execute(context)
        try:
            return neg(value)
        except (TemporalTypeError, TemporalValueError) as e:
            raise ExpressionExecutionError(
                context.tokens,
                self.pos,
                "Execution error in negation operator.",
                e,
            ) from e


class BinaryNode(Node):
    """An operator applied to two operands.
    Subclasses define ``operator_name`` and ``operate()``."""

    __slots__ = ("lhs", "rhs")
    operator_name = ""

    def __init__(self, lhs: Node, rhs: Node, pos: Position) -> None:
        super().__init__(pos)
        self.lhs = lhs
        self.rhs = rhs

    @staticmethod
    def operate(a: Any, b: Any) -> Any:
        raise NotImplementedError()

    def execute(self, context: _Context) -> Any:
        a = self.lhs.execute(context)
        b = self.rhs.execute(context)
        try:
            return self.operate(a, b)
        except (TemporalTypeError, TemporalValueError) as e:
            raise ExpressionExecutionError(
                context.tokens,
                self.pos,
                f"Execution error in {self.operator_name} operator.",
                e,
            ) from e


class LesserNode(BinaryNode):
    __slots__ = ()
    operator_name = "lesser-than"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) < 0


class LesserEqualNode(BinaryNode):
    __slots__ = ()
    operator_name = "lesser-or-equal"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) <= 0


class EqualNode(BinaryNode):
    __slots__ = ()
    operator_name = "equal"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) == 0


class NotEqualNode(BinaryNode):
    __slots__ = ()
    operator_name = "not-equal"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) != 0


class GreaterNode(BinaryNode):
    __slots__ = ()
    operator_name = "greater-than"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) > 0


class GreaterEqualNode(BinaryNode):
    __slots__ = ()
    operator_name = "greater-or-equal"

    @staticmethod
    def operate(a: Any, b: Any) -> bool:
        return cmp(a, b) >= 0


class AddNode(BinaryNode):
    __slots__ = ()
    operator_name = "addition"
    operate = staticmethod(add)


class SubNode(BinaryNode):
    __slots__ = ()
    operator_name = "subtraction"
    operate = staticmethod(sub)


# Longer operators first, so '<=' isn't read as '<'
_COMPARISONS = (
    ("<=", LesserEqualNode),
    ("<", LesserNode),
    ("==", EqualNode),
    ("!=", NotEqualNode),
    (">=", GreaterEqualNode),
    (">", GreaterNode),
)
_ADDITIVE = (("+", AddNode), ("-", SubNode))


class _TokenStream:
    __slots__ = ("tokens", "index", "offset")

    def __init__(self, tokens: Shape) -> None:
        self.tokens = tokens
        self.index = 0
        self.offset = 0

    @property
    def pos(self) -> Position:
        return (self.index, self.offset)

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def _text(self) -> str | None:
        if self.at_end():
            return None
        token = self.tokens[self.index]
        return token if isinstance(token, str) else None

    def _advance(self, n: int, text: str) -> None:
        self.offset += n
        if self.offset >= len(text):
            self.index += 1
            self.offset = 0

    def consume_if(self, expected: str) -> bool:
        text = self._text()
        if text is None or not text.startswith(expected, self.offset):
            return False
        self._advance(len(expected), text)
        return True

    def skip_whitespace(self) -> None:
        text = self._text()
        if text is None:
            return
        end = self.offset
        while end < len(text) and text[end] in WHITESPACE:
            end += 1
        self._advance(end - self.offset, text)

    def consume_placeholder(self) -> Placeholder | None:
        if self.at_end():
            return None
        token = self.tokens[self.index]
        if isinstance(token, str):
            return None
        self.index += 1
        return token


def _expr(s: _TokenStream) -> Node:
    s.skip_whitespace()
    lhs = _poly(s)
    pos = s.pos
    for op, node_cls in _COMPARISONS:
        if s.consume_if(op):
            s.skip_whitespace()
            return node_cls(lhs, _expr(s), pos)
    return lhs


def _poly(s: _TokenStream) -> Node:
    s.skip_whitespace()
    lhs = _negterm(s)
    s.skip_whitespace()
    pos = s.pos
    for op, node_cls in _ADDITIVE:
        if s.consume_if(op):
            s.skip_whitespace()
            return node_cls(lhs, _poly(s), pos)
    return lhs


def _negterm(s: _TokenStream) -> Node:
    s.skip_whitespace()
    pos = s.pos
    if s.consume_if("-"):
        s.skip_whitespace()
        return NegNode(_realexpr(s), pos)
    return _realexpr(s)


def _realexpr(s: _TokenStream) -> Node:
    s.skip_whitespace()
    pos = s.pos
    if s.consume_if("("):
        s.skip_whitespace()
        inner = _poly(s)
        if not s.consume_if(")"):
            raise ExpressionSyntaxError(s.tokens, pos, 'Expected ")".')
        return inner
    placeholder = s.consume_placeholder()
    if placeholder is not None:
        return VariableNode(placeholder.index, pos)
    raise ExpressionSyntaxError(s.tokens, pos, "Unexpected token.")


class Expression:
    """A parsed expression, which can be evaluated with
    different operand values"""

    __slots__ = ("shape", "root")

    def __init__(self, shape: Shape, root: Node) -> None:
        self.shape = shape
        self.root = root

    def evaluate(self, values: Sequence[Any]) -> Any:
        """Evaluate with the given operands, in placeholder order

        Raises
        ------
        ExpressionExecutionError
            If an operation fails, or an operand is missing
        """
        return self.root.execute(_Context(self.shape, values))

    def __repr__(self) -> str:
        return f"Expression({''.join(map(_token_text, self.shape))!r})"


def parse(tokens: Sequence[Token]) -> Expression:
    """Parse an expression shape into a syntax tree

    Example
    -------

    >>> parse(["-", Placeholder(0), " + ", Placeholder(1)])
    Expression('-{...} + {...}')

    Raises
    ------
    ExpressionSyntaxError
        If the tokens don't form a complete expression
    """
    s = _TokenStream(tuple(tokens))
    root = _expr(s)
    s.skip_whitespace()
    if not s.at_end():
        raise ExpressionSyntaxError(s.tokens, s.pos, "Unexpected token.")
    return Expression(s.tokens, root)


def shape_of(tokens: Sequence[Any]) -> Tuple[Shape, List[Any]]:
    """Split a token stream into its shape and its operand values.

    Adjacent strings are joined and empty ones dropped. Every other token
    becomes a :class:`Placeholder`, numbered in order of appearance.
    """
    shape: List[Token] = []
    values: List[Any] = []
    for token in tokens:
        if isinstance(token, str):
            if not token:
                continue
            if shape and isinstance(shape[-1], str):
                shape[-1] += token
            else:
                shape.append(token)
        else:
            shape.append(Placeholder(len(values)))
            values.append(token)
    return tuple(shape), values


class ExpressionEvaluator:
    """Evaluates token streams, caching the parsed expression per shape.

    Token streams with the same text and the operands in the same
    positions share one parsed expression. Entries are never evicted,
    so the cache grows with the number of distinct shapes.
    The cache is safe to share between threads.
    """

    def __init__(self) -> None:
        self._cache: Dict[Shape, Expression] = {}
        self._lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def evaluate(self, *tokens: Any) -> Any:
        """Evaluate a token stream. See :func:`dtexpr`."""
        shape, values = shape_of(tokens)
        try:
            expression = self._cache[shape]
        except KeyError:
            expression = parse(shape)
            with self._lock:
                expression = self._cache.setdefault(shape, expression)
            logger.debug("Parsed and cached expression %r", expression)
        return expression.evaluate(values)


_default_evaluator = ExpressionEvaluator()


def dtexpr(*tokens: Any) -> Any:
    """Evaluate an expression over dates, times and durations.

    Strings are expression text, all other tokens are operands.
    Parsed expressions are cached for the lifetime of the process.

    Example
    -------

    >>> dtexpr(Duration(hours=-1, minutes=2), " + ", Duration(minutes=4))
    Duration(-1 day, 23:06:00)
    >>> dtexpr(Time(12), " - (", Duration(hours=1), " + ", Duration(hours=2), ")")
    Time(09:00:00)

    Raises
    ------
    ExpressionSyntaxError
        If the expression text is malformed
    ExpressionExecutionError
        If an operation fails, for example on incompatible operand types
    """
    return _default_evaluator.evaluate(*tokens)
