from __future__ import annotations

from dataclasses import dataclass

from ..frontend.ast_expressions import Expression
from .codegen import HostSyntax, generate, generate_function
from .core import Environment, RuntimeContext
from .resolver import SlotTable, locate, to_positional
from .simplifier import simp
from .stager import Staged, stage


@dataclass(frozen=True, slots=True)
class CompiledExpression:
    expression: Expression
    table: SlotTable
    staged: Staged

    def run(self, env: Environment) -> int:
        return self.staged(to_positional(env, self.table))

    def run_many(self, envs: list[Environment]) -> list[int]:
        return [self.run(env) for env in envs]

    def source(self, target: str | HostSyntax = "python") -> str:
        return generate(self.expression, self.table, target)

    def function_source(
        self, target: str | HostSyntax = "python", name: str = "staged"
    ) -> str:
        return generate_function(self.expression, self.table, target, name)


def compile_expression(
    expr: Expression,
    simplify: bool = True,
    context: RuntimeContext | None = None,
) -> CompiledExpression:
    context = context or RuntimeContext()
    if simplify:
        expr = simp(expr, context)
    table = locate(expr)
    return CompiledExpression(
        expression=expr, table=table, staged=stage(expr, table, context)
    )
