import operator
from typing import Callable

from ..frontend.ast_expressions import (
    BinaryOp,
    BinaryOperator,
    Expression,
    Literal,
    Variable,
)
from .core import (
    Environment,
    RuntimeContext,
    UnrecognizedOperator,
    UnrecognizedVariant,
    lookup,
)

_binary_ops: dict[BinaryOperator, Callable[[int, int], int]] = {
    "+": operator.add,
    "*": operator.mul,
}


def binary_operator(expr: BinaryOp) -> Callable[[int, int], int]:
    try:
        return _binary_ops[expr.op]
    except KeyError:
        raise UnrecognizedOperator(expr, expr.op) from None


def eval_expr(
    expr: Expression, env: Environment, context: RuntimeContext | None = None
) -> int:
    context = context or RuntimeContext()
    return _eval(expr, env, context)


def _eval(expr: Expression, env: Environment, context: RuntimeContext) -> int:
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, Variable):
        return lookup(env, expr.name)

    if isinstance(expr, BinaryOp):
        apply = binary_operator(expr)
        left_value = _eval(expr.left, env, context)
        right_value = _eval(expr.right, env, context)
        result = apply(left_value, right_value)
        context.writer.debugln(
            f"[({left_value}) {expr.op} ({right_value}) => {result}]"
        )
        return result

    raise UnrecognizedVariant(expr)
