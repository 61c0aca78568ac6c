from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..writer import IndentingWriter

Environment = Mapping[str, int]
PositionalEnvironment = tuple[int, ...]


class UnboundVariable(KeyError):
    """A variable has no binding in the supplied environment or slot table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unbound variable: {self.name}"


class MalformedExpression(ValueError):
    """Raised at the ingestion boundary when a tree cannot be built."""


class UnrecognizedVariant(TypeError):
    """A traversal was handed something outside the closed set of nodes."""

    def __init__(self, node: object, message: str | None = None) -> None:
        super().__init__(
            message or f"Unsupported expression type: {type(node).__name__}"
        )
        self.node = node


class UnrecognizedOperator(UnrecognizedVariant):
    """A binary node carries an operator the language does not define."""

    def __init__(self, node: object, op: object) -> None:
        super().__init__(node, f"Unsupported operator: {op!r}")
        self.op = op


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)


def lookup(env: Environment, name: str) -> int:
    try:
        return env[name]
    except KeyError:
        raise UnboundVariable(name) from None
