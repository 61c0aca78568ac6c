from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from ..frontend.ast_expressions import BinaryOp, Expression, Literal, Variable
from .core import (
    Environment,
    PositionalEnvironment,
    UnboundVariable,
    UnrecognizedVariant,
    lookup,
)


class SlotTable(Mapping[str, int]):
    """Dense, zero-based slot numbers for the variables of one expression.

    Slots are handed out in first-occurrence order of a pre-order, left to
    right walk. The table is read-only once built.
    """

    __slots__ = ("_slots",)

    def __init__(self, names: list[str] | tuple[str, ...] = ()) -> None:
        slots: dict[str, int] = {}
        for name in names:
            if name in slots:
                raise ValueError(f"duplicate slot name: {name}")
            slots[name] = len(slots)
        self._slots = MappingProxyType(slots)

    def __getitem__(self, name: str) -> int:
        try:
            return self._slots[name]
        except KeyError:
            raise UnboundVariable(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._slots)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SlotTable):
            return self.names == other.names
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.names)

    def __repr__(self) -> str:
        return f"SlotTable({dict(self._slots)})"


def locate(expr: Expression) -> SlotTable:
    names: list[str] = []
    _collect_names(expr, names, set())
    return SlotTable(names)


def _collect_names(expr: Expression, names: list[str], seen: set[str]) -> None:
    if isinstance(expr, Literal):
        return

    if isinstance(expr, Variable):
        if expr.name not in seen:
            seen.add(expr.name)
            names.append(expr.name)
        return

    if isinstance(expr, BinaryOp):
        _collect_names(expr.left, names, seen)
        _collect_names(expr.right, names, seen)
        return

    raise UnrecognizedVariant(expr)


def to_positional(env: Environment, table: SlotTable) -> PositionalEnvironment:
    """Lay out ``env`` by slot so that ``result[table[name]] == env[name]``."""
    return tuple(lookup(env, name) for name in table.names)
