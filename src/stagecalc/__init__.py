from .frontend.ast_expressions import (
    BinaryOp,
    Expression,
    Literal,
    Variable,
    add,
    lit,
    mul,
    var,
)
from .frontend.decoder import decode_json, decode_record, encode_record
from .frontend.parser import parse_expression
from .runtime.codegen import generate, generate_function
from .runtime.core import (
    MalformedExpression,
    RuntimeContext,
    UnboundVariable,
    UnrecognizedVariant,
)
from .runtime.expression_evaluator import eval_expr
from .runtime.pipeline import CompiledExpression, compile_expression
from .runtime.printer import pp
from .runtime.resolver import SlotTable, locate, to_positional
from .runtime.simplifier import simp
from .runtime.stager import Staged, stage

__all__ = [
    "BinaryOp",
    "CompiledExpression",
    "Expression",
    "Literal",
    "MalformedExpression",
    "RuntimeContext",
    "SlotTable",
    "Staged",
    "UnboundVariable",
    "UnrecognizedVariant",
    "Variable",
    "add",
    "compile_expression",
    "decode_json",
    "decode_record",
    "encode_record",
    "eval_expr",
    "generate",
    "generate_function",
    "lit",
    "locate",
    "mul",
    "parse_expression",
    "pp",
    "simp",
    "stage",
    "to_positional",
    "var",
]
