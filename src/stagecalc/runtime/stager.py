"""Two-phase compilation of expressions.

``stage`` does every name-dependent step once: each variable is turned into
its slot number and each operator into the function that applies it. The
result is a tree of small frozen values (``Constant``, ``Slot``, ``Combine``)
that can be called with a positional environment any number of times.
Calling one only indexes a tuple and does arithmetic; there is no name or
table anywhere in a staged tree.

    table = locate(expr)
    staged = stage(expr, table)
    staged(to_positional({"x": 2}, table))
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable

from ..frontend.ast_expressions import (
    BinaryOp,
    BinaryOperator,
    Expression,
    Literal,
    Variable,
)
from .core import PositionalEnvironment, RuntimeContext, UnrecognizedVariant
from .expression_evaluator import binary_operator
from .resolver import SlotTable


class Staged(abc.ABC):
    @abc.abstractmethod
    def __call__(self, positional: PositionalEnvironment) -> int:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Constant(Staged):
    value: int

    def __call__(self, positional: PositionalEnvironment) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class Slot(Staged):
    index: int

    def __call__(self, positional: PositionalEnvironment) -> int:
        return positional[self.index]


@dataclass(frozen=True, slots=True)
class Combine(Staged):
    op: BinaryOperator
    apply: Callable[[int, int], int]
    left: Staged
    right: Staged

    def __call__(self, positional: PositionalEnvironment) -> int:
        return self.apply(self.left(positional), self.right(positional))


def stage(
    expr: Expression, table: SlotTable, context: RuntimeContext | None = None
) -> Staged:
    context = context or RuntimeContext()
    return _stage(expr, table, context)


def _stage(expr: Expression, table: SlotTable, context: RuntimeContext) -> Staged:
    if isinstance(expr, Literal):
        return Constant(expr.value)

    if isinstance(expr, Variable):
        index = table[expr.name]
        context.writer.debugln(f"[{expr.name} => slot {index}]")
        return Slot(index)

    if isinstance(expr, BinaryOp):
        apply = binary_operator(expr)
        left = _stage(expr.left, table, context)
        right = _stage(expr.right, table, context)
        return Combine(expr.op, apply, left, right)

    raise UnrecognizedVariant(expr)
