"""Evaluation of Python snippets for variables and filter functions.

Snippets come from the configuration file. A variable's ``script`` is a
block of statements whose final bare expression is its value, so simple
values are one-liners such as ``"2024-" + str(1 + 1)``. A filter's
``script`` becomes the body of a generated function; a trailing bare
expression is returned, so ``text.upper() + "!"`` needs no ``return``.

Every evaluation and every function call runs in a fresh namespace. Nothing
a snippet assigns survives into the next one.
"""

from __future__ import annotations

import ast
import builtins
import inspect
import keyword
import textwrap
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shellplate.exceptions import ScriptError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import CodeType

_VARIABLE_FILENAME = "<script>"
_PROGRAM_FILENAME = "<filters>"


@dataclass(frozen=True, slots=True)
class CompiledProgram:
    """Compiled filter functions, ready to be called by name.

    Attributes:
        source: The assembled function definitions.
        code: Code object defining every function when executed.
        names: Names of the defined functions.
    """

    source: str
    code: CodeType
    names: frozenset[str]


def _fresh_namespace() -> dict[str, object]:
    return {"__builtins__": builtins, "__name__": "__shellplate__"}


def _check_identifier(value: str, *, what: str, source: str) -> None:
    if not value.isidentifier() or keyword.iskeyword(value):
        msg = f"Invalid {what} name: {value!r}"
        raise ScriptError(msg, source=source)


def _parse(source: str, filename: str) -> ast.Module:
    try:
        return ast.parse(source, filename=filename, mode="exec")
    except SyntaxError as e:
        msg = f"Script syntax error: {e.msg} (line {e.lineno})"
        raise ScriptError(msg, source=source, cause=e) from e


def _compile(node: ast.AST, source: str, filename: str, mode: str) -> CodeType:
    try:
        return compile(node, filename, mode)
    except (SyntaxError, ValueError) as e:
        msg = f"Script compile error: {e}"
        raise ScriptError(msg, source=source, cause=e) from e


def evaluate_expression(source: str) -> object:
    """Evaluate a variable snippet and return its value.

    The source is parsed as a block of statements. If the last statement is
    an expression, its value is returned; otherwise the result is None.

    Args:
        source: Python source of the snippet.

    Returns:
        The value of the final expression.

    Raises:
        ScriptError: On syntax errors or exceptions raised while running.
    """
    module = _parse(textwrap.dedent(source), _VARIABLE_FILENAME)

    tail: ast.expr | None = None
    if module.body and isinstance(module.body[-1], ast.Expr):
        tail = module.body.pop().value

    statements = _compile(module, source, _VARIABLE_FILENAME, "exec")
    expression = (
        _compile(ast.Expression(body=tail), source, _VARIABLE_FILENAME, "eval")
        if tail is not None
        else None
    )

    namespace = _fresh_namespace()
    try:
        exec(statements, namespace)  # noqa: S102
        if expression is None:
            return None
        return eval(expression, namespace)  # noqa: S307
    except Exception as e:
        msg = f"Script error: {type(e).__name__}: {e}"
        raise ScriptError(msg, source=source, cause=e) from e


def build_function_source(name: str, arguments: Sequence[str], body: str) -> str:
    """Assemble a function definition from a filter spec.

    Args:
        name: Function name.
        arguments: Parameter names in order.
        body: Function body source, any indentation.

    Returns:
        ``def name(args):`` followed by the body indented one level.

    Raises:
        ScriptError: If the name or a parameter is not a valid identifier.
    """
    header_source = f"{name}({', '.join(arguments)})"
    _check_identifier(name, what="function", source=header_source)
    for argument in arguments:
        _check_identifier(argument, what="argument", source=header_source)

    block = textwrap.indent(textwrap.dedent(body).strip("\n"), "    ")
    return f"def {name}({', '.join(arguments)}):\n{block}\n"


class _ImplicitReturn(ast.NodeTransformer):
    """Return the value of a trailing bare expression in each top-level function."""

    def visit_FunctionDef(self, node: ast.FunctionDef) -> ast.FunctionDef:  # noqa: N802
        last = node.body[-1]
        if isinstance(last, ast.Expr):
            node.body[-1] = ast.copy_location(ast.Return(value=last.value), last)
        return node


def compile_functions(definitions: str) -> CompiledProgram:
    """Compile concatenated function definitions into one program.

    Args:
        definitions: Source containing only ``def`` statements.

    Returns:
        The compiled program.

    Raises:
        ScriptError: On any syntax error, or if the source contains anything
            besides function definitions.
    """
    module = _parse(definitions, _PROGRAM_FILENAME)

    names: list[str] = []
    for statement in module.body:
        if not isinstance(statement, ast.FunctionDef):
            msg = (
                f"Filter program may only contain function definitions "
                f"(line {statement.lineno})"
            )
            raise ScriptError(msg, source=definitions)
        names.append(statement.name)

    module = ast.fix_missing_locations(_ImplicitReturn().visit(module))
    code = _compile(module, definitions, _PROGRAM_FILENAME, "exec")
    return CompiledProgram(source=definitions, code=code, names=frozenset(names))


def call_function(
    program: CompiledProgram,
    name: str,
    args: Sequence[object],
) -> object:
    """Call a compiled function by name with positional arguments.

    The program is executed in a fresh namespace for every call.

    Args:
        program: Program from :func:`compile_functions`.
        name: Function to call.
        args: Positional arguments.

    Returns:
        The function's return value.

    Raises:
        ScriptError: If the function is missing, the arity does not match,
            or the function raises.
    """
    if name not in program.names:
        msg = f"Function not found: {name}"
        raise ScriptError(msg, source=program.source)

    namespace = _fresh_namespace()
    try:
        exec(program.code, namespace)  # noqa: S102
    except Exception as e:
        msg = f"Script error while loading functions: {type(e).__name__}: {e}"
        raise ScriptError(msg, source=program.source, cause=e) from e

    func = namespace[name]
    if not callable(func):
        msg = f"Function not found: {name}"
        raise ScriptError(msg, source=program.source)

    try:
        _ = inspect.signature(func).bind(*args)
    except TypeError as e:
        msg = f"Function {name} called with {len(args)} argument(s): {e}"
        raise ScriptError(msg, source=program.source, cause=e) from e

    try:
        return func(*args)
    except Exception as e:
        msg = f"Script error in {name}: {type(e).__name__}: {e}"
        raise ScriptError(msg, source=program.source, cause=e) from e


def stringify(value: object) -> str:
    """Convert a script value to template text.

    None, the value of a snippet without a trailing expression, renders as
    the empty string. Everything else uses ``str()``.
    """
    if value is None:
        return ""
    return str(value)
