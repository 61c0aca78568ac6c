"""Meaning-preserving algebraic simplification.

``simp`` rewrites bottom-up: both children are simplified first, then the
first matching rule for the root is applied.

    0 + e -> e          e + 0 -> e          a + b -> literal sum
    a * b -> literal product
    0 * e -> 0          e * 0 -> 0
    1 * e -> e          e * 1 -> e

Every rule preserves ``eval_expr`` for all environments over unbounded
integers, only ever shrinks the tree, and leaves nothing for a second pass
to do. Rules that would only hold under other arithmetic (``(a + b) - b ->
a`` once subtraction exists, for instance) do not belong here without the
same check.
"""

from ..frontend.ast_expressions import BinaryOp, Expression, Literal, Variable
from ..writer import indented_output
from .core import RuntimeContext, UnrecognizedOperator, UnrecognizedVariant
from .printer import pp

ZERO = Literal(0)
ONE = Literal(1)


def simp(expr: Expression, context: RuntimeContext | None = None) -> Expression:
    context = context or RuntimeContext()
    return _simp(expr, context)


def _simp(expr: Expression, context: RuntimeContext) -> Expression:
    if isinstance(expr, (Literal, Variable)):
        return expr

    if isinstance(expr, BinaryOp):
        with indented_output(context.writer):
            left = _simp(expr.left, context)
            right = _simp(expr.right, context)

        if expr.op == "+":
            result = _simp_add(left, right)
        elif expr.op == "*":
            result = _simp_mul(left, right)
        else:
            raise UnrecognizedOperator(expr, expr.op)

        if context.writer.debugging and result != expr:
            context.writer.debugln(f"[{pp(expr)} => {pp(result)}]")
        return result

    raise UnrecognizedVariant(expr)


def _simp_add(left: Expression, right: Expression) -> Expression:
    if left == ZERO:
        return right
    if right == ZERO:
        return left
    if isinstance(left, Literal) and isinstance(right, Literal):
        return Literal(left.value + right.value)
    return BinaryOp("+", left, right)


def _simp_mul(left: Expression, right: Expression) -> Expression:
    if isinstance(left, Literal) and isinstance(right, Literal):
        return Literal(left.value * right.value)
    if left == ZERO or right == ZERO:
        return ZERO
    if left == ONE:
        return right
    if right == ONE:
        return left
    return BinaryOp("*", left, right)
