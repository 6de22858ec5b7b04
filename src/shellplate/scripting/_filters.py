"""Exposing compiled script functions as Jinja2 filters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import TemplateRuntimeError

from shellplate.exceptions import ScriptError

from ._engine import (
    CompiledProgram,
    build_function_source,
    call_function,
    compile_functions,
    stringify,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from shellplate.config import VariableSpec

type TemplateFilter = Callable[[object], str]
type FilterSet = dict[str, TemplateFilter]


def assemble_program_source(specs: Iterable[VariableSpec]) -> str:
    """Concatenate the function definitions of every filter spec.

    Args:
        specs: Variable specs; entries without ``function`` are skipped.

    Returns:
        The assembled source, possibly empty.

    Raises:
        ScriptError: If a function or argument name is not an identifier.
    """
    parts = [
        build_function_source(spec.function, spec.argument_names, spec.body)
        for spec in specs
        if spec.function is not None
    ]
    return "\n".join(parts)


def compile_filter_program(specs: Iterable[VariableSpec]) -> CompiledProgram:
    """Assemble and compile all filter functions into one program.

    Raises:
        ScriptError: If any definition fails to compile.
    """
    return compile_functions(assemble_program_source(specs))


def make_filter(program: CompiledProgram, name: str) -> TemplateFilter:
    """Wrap a compiled function as a single-argument template filter.

    The filtered value is passed as a string. A failing call is raised as a
    Jinja2 ``TemplateRuntimeError`` so rendering stops.

    Args:
        program: Compiled filter program.
        name: Function to call.

    Returns:
        The filter callable.
    """

    def _filter(value: object) -> str:
        text = value if isinstance(value, str) else str(value)
        try:
            result = call_function(program, name, [text])
        except ScriptError as e:
            msg = f"Filter '{name}' failed: {e}"
            raise TemplateRuntimeError(msg) from e
        return stringify(result)

    _filter.__name__ = name
    return _filter


def build_filter_set(
    program: CompiledProgram,
    specs: Iterable[VariableSpec],
) -> FilterSet:
    """Create a filter for every spec that defines a function."""
    return {
        spec.function: make_filter(program, spec.function)
        for spec in specs
        if spec.function is not None
    }
