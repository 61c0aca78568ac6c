import pytest

from stagecalc.frontend.ast_expressions import add, lit, mul, var
from stagecalc.runtime.codegen import (
    C,
    PYTHON,
    HostSyntax,
    generate,
    generate_function,
    render,
)
from stagecalc.runtime.core import UnrecognizedVariant
from stagecalc.runtime.expression_evaluator import eval_expr
from stagecalc.runtime.printer import pp
from stagecalc.runtime.resolver import SlotTable, locate, to_positional
from stagecalc.snippets import expressions_up_to_depth
from .helpers import ENVIRONMENTS, load_python_function


# ===== Expression Text =====
def test_literal_renders_as_numeral() -> None:
    assert generate(lit(12), SlotTable()) == "12"


def test_negative_literal_is_wrapped() -> None:
    assert generate(add(var("x"), lit(-3)), SlotTable(["x"])) == "(arr[0]+(-3))"


def test_variables_become_array_reads() -> None:
    expr = mul(add(var("a"), var("b")), var("a"))
    assert generate(expr, locate(expr)) == "((arr[0]+arr[1])*arr[0])"


def test_shape_mirrors_the_printer() -> None:
    expr = mul(add(lit(1), lit(2)), add(lit(3), lit(4)))
    assert generate(expr, SlotTable()) == pp(expr)


def test_slot_numbers_follow_the_given_table() -> None:
    expr = add(var("a"), var("b"))
    assert generate(expr, SlotTable(["b", "a"])) == "(arr[1]+arr[0])"


def test_unbound_name_fails_generation() -> None:
    with pytest.raises(KeyError):
        generate(var("x"), SlotTable())


# ===== Targets =====
def test_python_function_source() -> None:
    expr = add(var("x"), lit(1))
    source = generate_function(expr, locate(expr), "python", name="inc")
    assert source == "def inc(arr):\n    return (arr[0]+1)\n"


def test_c_function_source() -> None:
    expr = mul(var("n"), var("n"))
    source = generate_function(expr, locate(expr), C)
    assert source == (
        "long long staged(const long long *arr) {\n"
        "    return (arr[0]*arr[0]);\n"
        "}\n"
    )


def test_custom_host_syntax() -> None:
    syntax = HostSyntax(
        name="js", array_name="env", function_template="({array}) => {body}"
    )
    expr = add(var("x"), lit(2))
    assert generate_function(expr, locate(expr), syntax) == "(env) => (env[0]+2)"


def test_unknown_target_is_rejected() -> None:
    with pytest.raises(ValueError, match="(?i)unknown target"):
        generate(lit(1), SlotTable(), "fortran")


@pytest.mark.parametrize("value", [2**63, -(2**63), 10**30])
def test_c_target_rejects_literals_it_cannot_spell(value: int) -> None:
    with pytest.raises(ValueError, match=r"(?i)out of range.*'c'"):
        generate(add(var("x"), lit(value)), SlotTable(["x"]), "c")


def test_c_target_accepts_literals_at_the_bounds() -> None:
    expr = add(lit(2**63 - 1), lit(-(2**63 - 1)))
    assert generate(expr, SlotTable(), "c") == (
        "(9223372036854775807+(-9223372036854775807))"
    )


def test_python_target_has_no_literal_bounds() -> None:
    assert generate(lit(-(2**80)), SlotTable()) == f"({-(2**80)})"


def test_render_rejects_unknown_staged_values() -> None:
    with pytest.raises(UnrecognizedVariant):
        render(object(), PYTHON)  # type: ignore[arg-type]


# ===== Host Execution =====
def test_generated_python_agrees_with_interpreter() -> None:
    for expr in expressions_up_to_depth(2, literals=(0, 1, -2)):
        table = locate(expr)
        function = load_python_function(generate_function(expr, table))
        for env in ENVIRONMENTS:
            assert function(to_positional(env, table)) == eval_expr(expr, env), expr
