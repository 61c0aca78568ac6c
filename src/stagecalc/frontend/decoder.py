"""Ingestion boundary for tree-shaped expression records.

A record is a mapping with a ``type`` discriminant:

    {"type": "Literal", "value": 3}
    {"type": "Variable", "name": "x"}
    {"type": "Plus", "left": <record>, "right": <record>}
    {"type": "Multiply", "left": <record>, "right": <record>}

Anything else is rejected with ``MalformedExpression`` before an expression
reaches the interpreter, simplifier or resolver.
"""

import json
from typing import Any, Mapping

from ..runtime.core import MalformedExpression, UnrecognizedVariant
from .ast_expressions import (
    BinaryOp,
    BinaryOperator,
    Expression,
    Literal,
    Variable,
    binary,
    lit,
    var,
)

_record_operators: dict[str, BinaryOperator] = {
    "Plus": "+",
    "Multiply": "*",
}

_operator_records: dict[BinaryOperator, str] = {
    op: kind for kind, op in _record_operators.items()
}


def decode_json(text: str) -> Expression:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as error:
        raise MalformedExpression(f"invalid JSON: {error}") from error
    return decode_record(record)


def decode_record(record: object) -> Expression:
    if not isinstance(record, Mapping):
        raise MalformedExpression(
            f"expected an expression record, got {type(record).__name__}"
        )

    kind = _require(record, "type")
    if not isinstance(kind, str):
        raise MalformedExpression(f"record type must be a string, got {kind!r}")

    if kind == "Literal":
        return lit(_require(record, "value"))

    if kind == "Variable":
        return var(_require(record, "name"))

    if kind in _record_operators:
        left = decode_record(_require(record, "left"))
        right = decode_record(_require(record, "right"))
        return binary(_record_operators[kind], left, right)

    raise MalformedExpression(f"unknown expression record type: {kind!r}")


def encode_record(expr: Expression) -> dict[str, Any]:
    if isinstance(expr, Literal):
        return {"type": "Literal", "value": expr.value}

    if isinstance(expr, Variable):
        return {"type": "Variable", "name": expr.name}

    if isinstance(expr, BinaryOp):
        return {
            "type": _operator_records[expr.op],
            "left": encode_record(expr.left),
            "right": encode_record(expr.right),
        }

    raise UnrecognizedVariant(expr)


def encode_json(expr: Expression) -> str:
    return json.dumps(encode_record(expr))


def _require(record: Mapping[str, Any], key: str) -> Any:
    if key not in record:
        kind = record.get("type", "<untyped>")
        raise MalformedExpression(f"{kind} record is missing field {key!r}")
    return record[key]
