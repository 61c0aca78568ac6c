from ..frontend.ast_expressions import (
    OPERATORS,
    BinaryOp,
    Expression,
    Literal,
    Variable,
)
from .core import UnrecognizedOperator, UnrecognizedVariant


def pp(expr: Expression) -> str:
    """Render ``expr`` in fully parenthesized infix form, e.g. ``((1+2)*x)``."""
    if isinstance(expr, Literal):
        return str(expr.value)

    if isinstance(expr, Variable):
        return expr.name

    if isinstance(expr, BinaryOp):
        if expr.op not in OPERATORS:
            raise UnrecognizedOperator(expr, expr.op)
        return f"({pp(expr.left)}{expr.op}{pp(expr.right)})"

    raise UnrecognizedVariant(expr)
