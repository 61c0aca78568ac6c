from .frontend.ast_expressions import Expression, Literal, Variable, add, mul

DEFAULT_LITERALS = (0, 1, 2)
DEFAULT_NAMES = ("x", "y")


def expressions_up_to_depth(
    depth: int,
    *,
    literals: tuple[int, ...] = DEFAULT_LITERALS,
    names: tuple[str, ...] = DEFAULT_NAMES,
) -> list[Expression]:
    """Every tree of height ``<= depth`` over the given leaves."""
    leaves: list[Expression] = [Literal(value) for value in literals]
    leaves += [Variable(name) for name in names]

    trees = list(leaves)
    for _ in range(depth):
        trees = leaves + [
            build(left, right)
            for build in (add, mul)
            for left in trees
            for right in trees
        ]
    return trees


def polynomial_expression() -> Expression:
    """``(x*x + 0) * 1 + (2*3) * y``, which simplifies to ``x*x + 6*y``."""
    x = Variable("x")
    y = Variable("y")
    return add(
        mul(add(mul(x, x), Literal(0)), Literal(1)),
        mul(mul(Literal(2), Literal(3)), y),
    )
