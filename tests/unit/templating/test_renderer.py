from pathlib import Path

import pytest
from jinja2 import TemplateRuntimeError, TemplateSyntaxError

from shellplate.config import RootConfiguration
from shellplate.exceptions import ScriptError
from shellplate.scripting import build_filter_set, compile_filter_program
from shellplate.templating import (
    MAIN_TEMPLATE_NAME,
    EnvironmentConfig,
    create_environment,
    render,
    render_template,
    render_template_string,
)
from tests.conftest import write_template


class TestCreateEnvironment:
    def test_registers_main_template(self) -> None:
        env = create_environment("Hello {{ name }}")
        assert env.get_template(MAIN_TEMPLATE_NAME).render(name="World") == "Hello World"

    def test_registers_filters(self) -> None:
        env = create_environment("x", filters={"twice": lambda v: f"{v}{v}"})
        assert "twice" in env.filters

    def test_default_config(self) -> None:
        env = create_environment("")
        assert env.autoescape is False
        assert env.keep_trailing_newline is False

    def test_custom_config(self) -> None:
        env = create_environment(
            "", config=EnvironmentConfig(keep_trailing_newline=True, trim_blocks=True)
        )
        assert env.keep_trailing_newline is True
        assert env.trim_blocks is True


class TestRenderTemplateString:
    def test_single_variable_substitution(self) -> None:
        assert render_template_string("Hello {{ name }}", {"name": "World"}) == (
            "Hello World"
        )

    def test_missing_variable_renders_empty(self) -> None:
        assert render_template_string("[{{ missing }}]", {"other": "value"}) == "[]"

    def test_filter_round_trip(self) -> None:
        config = RootConfiguration.model_validate(
            {
                "vars": [
                    {
                        "function": "shout",
                        "arguments": [{"name": "text"}],
                        "script": "text.upper() + '!'",
                    }
                ]
            }
        )
        program = compile_filter_program(config.variables)
        filters = build_filter_set(program, config.variables)
        result = render_template_string(
            "{{ who | shout }}", {"who": "world"}, filters=filters
        )
        assert result == "WORLD!"

    def test_builtin_filters_still_available(self) -> None:
        assert render_template_string("{{ name|upper }}", {"name": "world"}) == "WORLD"

    def test_no_html_escaping(self) -> None:
        assert render_template_string("{{ v }}", {"v": "<b>&</b>"}) == "<b>&</b>"

    def test_trailing_newline_dropped(self) -> None:
        assert render_template_string("line\n", {}) == "line"

    def test_syntax_error(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            _ = render_template_string("{% if %}", {})


class TestRenderTemplate:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = write_template(tmp_path, "Hi {{ who }}")
        assert render_template(path, {"who": "there"}) == "Hi there"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = render_template(tmp_path / "missing.j2", {})


class TestRender:
    def test_full_pipeline(self, tmp_path: Path) -> None:
        config = RootConfiguration.model_validate(
            {
                "default_shell": "sh",
                "vars": [
                    {"name": "who", "cmd": "echo world"},
                    {"name": "count", "script": "1 + 2"},
                    {"function": "shout", "arguments": ["text"], "script": "text.upper() + '!'"},
                ],
            }
        )
        path = write_template(tmp_path, "{{ who | shout }} x{{ count }}{{ nope }}")
        assert render(config, path) == "WORLD! x3"

    def test_broken_filter_stops_before_commands(self, tmp_path: Path) -> None:
        marker = tmp_path / "ran"
        config = RootConfiguration.model_validate(
            {
                "default_shell": "sh",
                "vars": [
                    {"name": "side", "cmd": f"touch {marker}"},
                    {"function": "broken", "arguments": ["s"], "script": "s +"},
                ],
            }
        )
        path = write_template(tmp_path, "{{ side }}")
        with pytest.raises(ScriptError):
            _ = render(config, path)
        assert not marker.exists()

    def test_failing_filter_aborts_render(self, tmp_path: Path) -> None:
        config = RootConfiguration.model_validate(
            {"vars": [{"function": "boom", "arguments": ["s"], "script": "1 / 0"}]}
        )
        path = write_template(tmp_path, "{{ 'x' | boom }}")
        with pytest.raises(TemplateRuntimeError, match="Filter 'boom' failed"):
            _ = render(config, path)

    def test_removes_extracted_bundled_shell(
        self, tmp_path: Path, bundled_payload: Path
    ) -> None:
        config = RootConfiguration.model_validate(
            {"vars": [{"name": "greeting", "cmd": "echo fallback"}]}
        )
        path = write_template(tmp_path, "{{ greeting }}")
        assert render(config, path) == "fallback"
        assert not any((tmp_path / "cache").glob("fish_runtime*"))
