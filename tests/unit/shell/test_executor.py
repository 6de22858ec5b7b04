from pathlib import Path

import pytest

from shellplate.shell import (
    ERROR_PREFIX,
    CommandConfig,
    ShellChoice,
    build_command,
    execute,
    run_command,
)

SH = ShellChoice(name="sh")


class TestCommandConfig:
    def test_default_values(self) -> None:
        config = CommandConfig(command="echo hello")
        assert config.shell.bundled is True
        assert config.cwd is None
        assert config.env == {}

    def test_frozen(self) -> None:
        config = CommandConfig(command="echo hello")
        with pytest.raises(AttributeError):
            config.command = "echo world"  # pyright: ignore[reportAttributeAccessIssue]


class TestBuildCommand:
    def test_named_shell_uses_dash_c(self) -> None:
        config = CommandConfig(command="echo hi", shell=SH)
        assert build_command(config) == ["sh", "-c", "echo hi"]

    def test_bundled_shell_uses_materialized_path(self, bundled_payload: Path) -> None:
        argv = build_command(CommandConfig(command="echo hi"))
        assert argv[0].endswith("fish_runtime")
        assert argv[1:] == ["-c", "echo hi"]


class TestRunCommand:
    def test_simple_echo(self) -> None:
        assert run_command("echo hello", SH) == "hello"

    def test_trims_surrounding_whitespace(self) -> None:
        assert run_command("printf '  spaces  \\n'", SH) == "spaces"

    def test_keeps_inner_newlines(self) -> None:
        assert run_command("printf 'a\\nb\\n'", SH) == "a\nb"

    def test_environment_overlay(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SHELLPLATE_TEST_VAR", raising=False)
        result = run_command(
            "echo $SHELLPLATE_TEST_VAR", SH, env={"SHELLPLATE_TEST_VAR": "success"}
        )
        assert result == "success"

    def test_environment_overlay_preserves_inherited(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHELLPLATE_INHERITED", "kept")
        result = run_command(
            'echo "$SHELLPLATE_INHERITED $EXTRA"', SH, env={"EXTRA": "added"}
        )
        assert result == "kept added"

    def test_environment_overlay_overrides(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHELLPLATE_OVERRIDE", "parent")
        result = run_command(
            "echo $SHELLPLATE_OVERRIDE", SH, env={"SHELLPLATE_OVERRIDE": "child"}
        )
        assert result == "child"

    def test_working_directory(self, tmp_path: Path) -> None:
        assert run_command("pwd -P", SH, working_directory=tmp_path) == str(
            tmp_path.resolve()
        )

    def test_nonzero_exit_still_returns_stdout(self) -> None:
        assert run_command("echo partial; exit 3", SH) == "partial"

    def test_stderr_ignored(self) -> None:
        assert run_command("echo out; echo err >&2", SH) == "out"

    def test_invalid_utf8_replaced(self) -> None:
        result = run_command("printf 'ok\\377'", SH)
        assert result == "ok�"

    def test_missing_shell_is_fail_soft(self) -> None:
        result = run_command("echo hi", ShellChoice(name="shellplate-no-such-shell"))
        assert result.startswith("ERROR:")

    def test_nul_byte_in_command_is_fail_soft(self) -> None:
        result = run_command("echo a\x00b", ShellChoice.named("sh"))
        assert result.startswith(ERROR_PREFIX)

    def test_invalid_environment_is_fail_soft(self) -> None:
        result = run_command("echo hi", SH, env={"BAD=KEY": "value"})
        assert result.startswith(ERROR_PREFIX)

    def test_missing_working_directory_is_fail_soft(self, tmp_path: Path) -> None:
        result = run_command("pwd", SH, working_directory=tmp_path / "missing")
        assert result.startswith(ERROR_PREFIX)

    def test_missing_bundled_payload_is_fail_soft(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            "shellplate.shell._bundled.get_runtime_dir", lambda: tmp_path / "none"
        )
        result = execute(CommandConfig(command="echo hi"))
        assert result.startswith("ERROR: Bundled shell payload not found")

    def test_bundled_shell_runs_command(self, bundled_payload: Path) -> None:
        assert execute(CommandConfig(command="echo fallback")) == "fallback"
