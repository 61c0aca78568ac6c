from dataclasses import dataclass

from ..frontend.ast_expressions import Expression
from .core import RuntimeContext, UnrecognizedVariant
from .resolver import SlotTable
from .stager import Combine, Constant, Slot, Staged, stage


@dataclass(frozen=True, slots=True)
class HostSyntax:
    """How one host language spells literals, array reads and functions.

    ``literal_bounds`` is the inclusive range of literals the host can write
    directly; ``None`` means unbounded. Only literals are checked here.
    Overflow of intermediate results at run time belongs to the host.
    """

    name: str
    array_name: str
    function_template: str
    literal_bounds: tuple[int, int] | None = None

    def numeral(self, value: int) -> str:
        if self.literal_bounds is not None:
            low, high = self.literal_bounds
            if not low <= value <= high:
                raise ValueError(
                    f"literal {value} is out of range for target {self.name!r}"
                )
        if value < 0:
            return f"({value})"
        return str(value)

    def element(self, index: int) -> str:
        return f"{self.array_name}[{index}]"


PYTHON = HostSyntax(
    name="python",
    array_name="arr",
    function_template="def {name}({array}):\n    return {body}\n",
)

C = HostSyntax(
    name="c",
    array_name="arr",
    function_template="long long {name}(const long long *{array}) {{\n"
    "    return {body};\n"
    "}}\n",
    literal_bounds=(-(2**63 - 1), 2**63 - 1),
)

HOST_SYNTAXES: dict[str, HostSyntax] = {
    syntax.name: syntax for syntax in (PYTHON, C)
}


def host_syntax(target: str | HostSyntax) -> HostSyntax:
    if isinstance(target, HostSyntax):
        return target
    try:
        return HOST_SYNTAXES[target]
    except KeyError:
        raise ValueError(
            f"unknown target {target!r}, expected one of {sorted(HOST_SYNTAXES)}"
        ) from None


def render(staged: Staged, target: str | HostSyntax = "python") -> str:
    syntax = host_syntax(target)
    return _render(staged, syntax)


def _render(staged: Staged, syntax: HostSyntax) -> str:
    if isinstance(staged, Constant):
        return syntax.numeral(staged.value)

    if isinstance(staged, Slot):
        return syntax.element(staged.index)

    if isinstance(staged, Combine):
        left = _render(staged.left, syntax)
        right = _render(staged.right, syntax)
        return f"({left}{staged.op}{right})"

    raise UnrecognizedVariant(staged)


def generate(
    expr: Expression,
    table: SlotTable,
    target: str | HostSyntax = "python",
    context: RuntimeContext | None = None,
) -> str:
    """Emit host source for ``expr`` that reads variables from an array.

    Variables become ``arr[slot]`` according to ``table``; the array must be
    laid out the same way ``to_positional`` lays out an environment.
    """
    return render(stage(expr, table, context), target)


def generate_function(
    expr: Expression,
    table: SlotTable,
    target: str | HostSyntax = "python",
    name: str = "staged",
) -> str:
    syntax = host_syntax(target)
    body = generate(expr, table, syntax)
    return syntax.function_template.format(
        name=name, array=syntax.array_name, body=body
    )
