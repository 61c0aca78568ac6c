from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree

from .ast_expressions import BinaryOperator, Expression, Literal, Variable, binary


class AstTransformer(Transformer[Token, Expression]):
    def add(self, children: list[object]) -> Expression:
        return self._binary(children, "+")

    def mul(self, children: list[object]) -> Expression:
        return self._binary(children, "*")

    def _binary(self, children: list[object], op: BinaryOperator) -> Expression:
        [left, right] = children
        return binary(op, self._as_expression(left), self._as_expression(right))

    def var(self, children: list[object]) -> Variable:
        [name] = children
        assert isinstance(name, Token)
        return Variable(str(name))

    def number(self, children: list[object]) -> Literal:
        [number] = children
        assert isinstance(number, Token)
        return Literal(int(str(number)))

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("stagecalc.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[Token], tree)


def parse_expression(source: str) -> Expression:
    parsed = parse_tree(source)
    expr = AstTransformer().transform(parsed)
    assert isinstance(expr, Expression)
    return expr
