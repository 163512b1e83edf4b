"""Tests for subprocess helpers."""

from pathlib import Path

import pytest

from material_release.utils.shell import ShellError, capture, run, strip_ansi


class TestStripAnsi:
    def test_removes_color_codes(self) -> None:
        assert strip_ansi("\x1b[32mangularcore\x1b[0m") == "angularcore"

    def test_empty_input(self) -> None:
        assert strip_ansi("") == ""


class TestRun:
    def test_returns_output(self, tmp_path: Path) -> None:
        result = run(["echo", "hello"], cwd=tmp_path)
        assert result.stdout.strip() == "hello"

    def test_strips_ansi_from_output(self, tmp_path: Path) -> None:
        result = run(["printf", "\\033[32mangularcore\\033[0m"], cwd=tmp_path)
        assert result.stdout == "angularcore"

    def test_raises_on_failure(self, tmp_path: Path) -> None:
        with pytest.raises(ShellError) as exc_info:
            run(["bash", "-c", "echo bad >&2; exit 3"], cwd=tmp_path)
        assert exc_info.value.returncode == 3
        assert "bad" in exc_info.value.stderr


class TestCapture:
    def test_returns_trimmed_stdout(self, tmp_path: Path) -> None:
        assert capture("echo '  0.9.7  '", cwd=tmp_path) == "0.9.7"

    def test_supports_shell_syntax(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("x")
        assert capture("echo $(ls *.txt) 2> /dev/null", cwd=tmp_path) == "a.txt"

    def test_failure_returned_not_raised(self, tmp_path: Path) -> None:
        result = capture("echo out; echo err >&2; exit 4", cwd=tmp_path)
        assert isinstance(result, ShellError)
        assert result.returncode == 4
        assert result.stdout == "out"
        assert result.stderr == "err"

    def test_missing_directory_returned_not_raised(self, tmp_path: Path) -> None:
        result = capture("true", cwd=tmp_path / "missing")
        assert isinstance(result, ShellError)
        assert result.returncode == -1
