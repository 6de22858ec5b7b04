"""Python snippet evaluation and script-backed template filters."""

from ._engine import (
    CompiledProgram,
    build_function_source,
    call_function,
    compile_functions,
    evaluate_expression,
    stringify,
)
from ._filters import (
    FilterSet,
    TemplateFilter,
    assemble_program_source,
    build_filter_set,
    compile_filter_program,
    make_filter,
)

__all__ = [
    "CompiledProgram",
    "FilterSet",
    "TemplateFilter",
    "assemble_program_source",
    "build_filter_set",
    "build_function_source",
    "call_function",
    "compile_filter_program",
    "compile_functions",
    "evaluate_expression",
    "make_filter",
    "stringify",
]
