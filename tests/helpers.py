from typing import Callable, TextIO

from stagecalc.frontend.ast_expressions import BinaryOp, Expression

ENVIRONMENTS = (
    {"x": 0, "y": 0},
    {"x": 1, "y": -1},
    {"x": 3, "y": 7},
    {"x": -4, "y": 11},
)


class UnknownNode(Expression):
    pass


def subtraction(left: Expression, right: Expression) -> BinaryOp:
    # Built directly; the smart constructors would refuse the operator.
    return BinaryOp("-", left, right)  # type: ignore[arg-type]


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output


def load_python_function(source: str, name: str = "staged") -> Callable[..., int]:
    # Stands in for the external host runtime.
    namespace: dict[str, object] = {}
    exec(compile(source, "<generated>", "exec"), namespace)
    function = namespace[name]
    assert callable(function)
    return function
