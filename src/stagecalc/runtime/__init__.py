from .core import (
    Environment,
    MalformedExpression,
    PositionalEnvironment,
    RuntimeContext,
    UnboundVariable,
    UnrecognizedVariant,
)

__all__ = [
    "Environment",
    "MalformedExpression",
    "PositionalEnvironment",
    "RuntimeContext",
    "UnboundVariable",
    "UnrecognizedVariant",
]
