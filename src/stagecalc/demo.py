from .runtime.core import RuntimeContext
from .runtime.expression_evaluator import eval_expr
from .runtime.pipeline import compile_expression
from .runtime.printer import pp
from .snippets import polynomial_expression
from .writer import IndentingWriter, surrounding_box_title


def run_demo(writer: IndentingWriter | None = None) -> None:
    writer = writer or IndentingWriter()
    context = RuntimeContext(writer=writer)
    expr = polynomial_expression()
    envs = [{"x": 3, "y": 4}, {"x": -2, "y": 10}]

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("POLYNOMIAL")
        writer.println(f"source      {pp(expr)}")

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("interpreted")
        writer.newline(on_debug_only=True)
        for env in envs:
            writer.println(f"{env} -> {eval_expr(expr, env, context)}")

    compiled = compile_expression(expr, context=context)
    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("staged")
        writer.println(f"simplified  {pp(compiled.expression)}")
        writer.println(f"slots       {dict(compiled.table)}")
        for env, result in zip(envs, compiled.run_many(envs), strict=True):
            writer.println(f"{env} -> {result}")

    with surrounding_box_title(writer):
        writer.println("generated")
        writer.print(compiled.function_source("python"))
        writer.print(compiled.function_source("c"))


if __name__ == "__main__":
    run_demo()
