from dataclasses import dataclass
from typing import Literal as TypingLiteral

from ..runtime.core import MalformedExpression, UnrecognizedVariant

BinaryOperator = TypingLiteral["+", "*"]

OPERATORS: tuple[BinaryOperator, ...] = ("+", "*")


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: int


@dataclass(frozen=True, slots=True)
class BinaryOp(Expression):
    op: BinaryOperator
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Variable(Expression):
    name: str


def lit(value: int) -> Literal:
    # bool is an int subclass but not a value of the language
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedExpression(
            f"literal value must be an integer, got {value!r}"
        )
    return Literal(value)


def var(name: str) -> Variable:
    if not isinstance(name, str) or not name:
        raise MalformedExpression(
            f"variable name must be a non-empty string, got {name!r}"
        )
    return Variable(name)


def binary(op: BinaryOperator, left: Expression, right: Expression) -> BinaryOp:
    if op not in OPERATORS:
        raise MalformedExpression(f"unknown operator: {op!r}")
    for child in (left, right):
        if not isinstance(child, Expression):
            raise MalformedExpression(
                f"operand of {op} must be an expression, got {type(child).__name__}"
            )
    return BinaryOp(op, left, right)


def add(left: Expression, right: Expression) -> BinaryOp:
    return binary("+", left, right)


def mul(left: Expression, right: Expression) -> BinaryOp:
    return binary("*", left, right)


def free_variables(expr: Expression) -> set[str]:
    if isinstance(expr, Literal):
        return set()

    if isinstance(expr, Variable):
        return {expr.name}

    if isinstance(expr, BinaryOp):
        return free_variables(expr.left) | free_variables(expr.right)

    raise UnrecognizedVariant(expr)


def size(expr: Expression) -> int:
    if isinstance(expr, (Literal, Variable)):
        return 1

    if isinstance(expr, BinaryOp):
        return 1 + size(expr.left) + size(expr.right)

    raise UnrecognizedVariant(expr)


def depth(expr: Expression) -> int:
    if isinstance(expr, (Literal, Variable)):
        return 0

    if isinstance(expr, BinaryOp):
        return 1 + max(depth(expr.left), depth(expr.right))

    raise UnrecognizedVariant(expr)
