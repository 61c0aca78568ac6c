import pytest

from stagecalc.frontend.ast_expressions import add, lit, mul, var
from stagecalc.runtime.core import (
    RuntimeContext,
    UnboundVariable,
    UnrecognizedOperator,
    UnrecognizedVariant,
)
from stagecalc.runtime.expression_evaluator import eval_expr
from stagecalc.writer import IndentingWriter
from .helpers import UnknownNode, subtraction


# ===== Literals And Arithmetic =====
def test_literal_evaluates_to_itself() -> None:
    assert eval_expr(lit(2), {}) == 2


def test_nested_arithmetic() -> None:
    expr = mul(add(lit(1), lit(2)), add(lit(3), lit(4)))
    assert eval_expr(expr, {}) == 21


def test_arithmetic_is_unbounded() -> None:
    big = 2**70
    assert eval_expr(mul(lit(big), lit(big)), {}) == 2**140


# ===== Variables =====
def test_variables_read_from_environment() -> None:
    expr = add(mul(var("x"), var("x")), var("y"))
    assert eval_expr(expr, {"x": -3, "y": 4}) == 13


def test_extra_bindings_are_ignored() -> None:
    assert eval_expr(var("a"), {"a": 1, "unused": 99}) == 1


def test_unbound_variable_is_reported_by_name() -> None:
    with pytest.raises(UnboundVariable, match="missing") as raised:
        eval_expr(add(var("x"), var("missing")), {"x": 1})

    assert raised.value.name == "missing"


def test_unbound_variable_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        eval_expr(var("x"), {})


def test_unknown_node_is_rejected() -> None:
    with pytest.raises(UnrecognizedVariant, match="UnknownNode"):
        eval_expr(mul(lit(1), UnknownNode()), {})


def test_unknown_operator_is_rejected() -> None:
    with pytest.raises(UnrecognizedOperator, match="'-'") as raised:
        eval_expr(subtraction(lit(3), lit(2)), {})

    assert not isinstance(raised.value, KeyError)
    assert isinstance(raised.value, UnrecognizedVariant)


# ===== Tracing =====
def test_debug_writer_traces_each_binary_step(
    capsys: pytest.CaptureFixture[str],
) -> None:
    context = RuntimeContext(writer=IndentingWriter(debug=True))
    expr = mul(add(lit(1), lit(2)), add(lit(3), lit(4)))

    eval_expr(expr, {}, context)

    assert capsys.readouterr().out.splitlines() == [
        "[(1) + (2) => 3]",
        "[(3) + (4) => 7]",
        "[(3) * (7) => 21]",
    ]


def test_default_writer_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    eval_expr(add(lit(1), lit(2)), {})
    assert capsys.readouterr().out == ""
