import pytest
from jinja2 import TemplateRuntimeError

from shellplate.config import VariableSpec
from shellplate.exceptions import ScriptError
from shellplate.scripting import (
    assemble_program_source,
    build_filter_set,
    compile_filter_program,
    compile_functions,
    make_filter,
)

SHOUT = VariableSpec(function="shout", arguments=("text",), body="text.upper() + '!'")


class TestAssembleProgramSource:
    def test_skips_plain_variables(self) -> None:
        specs = [VariableSpec(name="x", body="1"), SHOUT]
        assert assemble_program_source(specs) == (
            "def shout(text):\n    text.upper() + '!'\n"
        )

    def test_joins_definitions(self) -> None:
        other = VariableSpec(function="twice", arguments=("s",), body="s + s")
        source = assemble_program_source([SHOUT, other])
        assert "def shout(text):" in source
        assert "def twice(s):" in source

    def test_no_filters(self) -> None:
        assert assemble_program_source([VariableSpec(name="x", body="1")]) == ""


class TestCompileFilterProgram:
    def test_one_broken_filter_blocks_all(self) -> None:
        broken = VariableSpec(function="broken", arguments=("s",), body="s +")
        with pytest.raises(ScriptError):
            _ = compile_filter_program([SHOUT, broken])


class TestMakeFilter:
    def test_calls_function_with_single_value(self) -> None:
        program = compile_filter_program([SHOUT])
        assert make_filter(program, "shout")("world") == "WORLD!"

    def test_non_string_values_passed_as_text(self) -> None:
        program = compile_functions("def kind(v):\n    type(v).__name__\n")
        assert make_filter(program, "kind")(42) == "str"

    def test_result_stringified(self) -> None:
        program = compile_functions("def size(v):\n    len(v)\n")
        assert make_filter(program, "size")("abcd") == "4"

    def test_failure_becomes_template_error(self) -> None:
        program = compile_functions("def pair(a, b):\n    a + b\n")
        with pytest.raises(TemplateRuntimeError, match="Filter 'pair' failed") as e:
            _ = make_filter(program, "pair")("x")
        assert isinstance(e.value.__cause__, ScriptError)

    def test_filter_is_named(self) -> None:
        program = compile_filter_program([SHOUT])
        assert make_filter(program, "shout").__name__ == "shout"


class TestBuildFilterSet:
    def test_one_filter_per_function(self) -> None:
        specs = [SHOUT, VariableSpec(name="x", body="1")]
        program = compile_filter_program(specs)
        filters = build_filter_set(program, specs)
        assert list(filters) == ["shout"]
        assert filters["shout"]("hey") == "HEY!"
