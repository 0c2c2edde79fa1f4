"""Tests for the nestcss CLI commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from nestcss import __version__
from nestcss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile" in result.output
        assert "check" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# compile command
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_compile_to_stdout(self) -> None:
        result = CliRunner().invoke(cli, ["compile", str(FIXTURES / "main.less")])
        assert result.exit_code == 0
        assert "nav a span {" in result.output
        assert "margin: 0 4px;" in result.output

    def test_compile_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(
            cli, ["compile", str(FIXTURES / "main.less"), "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text().startswith("nav {\n")

    def test_unclosed_block_fails(self) -> None:
        result = CliRunner().invoke(cli, ["compile", str(FIXTURES / "unclosed.less")])
        assert result.exit_code == 1
        assert "Unclosed block" in result.output

    def test_unclosed_block_dropped(self) -> None:
        result = CliRunner().invoke(
            cli, ["compile", str(FIXTURES / "unclosed.less"), "--on-unclosed", "drop"]
        )
        assert result.exit_code == 1
        assert "unclosed" in result.output.lower()

    def test_missing_import_writes_css_and_fails(self) -> None:
        result = CliRunner().invoke(cli, ["compile", str(FIXTURES / "missing_import.less")])
        assert result.exit_code == 1
        assert "a {\n  color: red;\n}\n" in result.output
        assert "missing.less" in result.output

    def test_omit_empty(self, tmp_path: Path) -> None:
        src = tmp_path / "s.less"
        src.write_text("a {\n  b {\n    x: 1;\n  }\n}\n")
        result = CliRunner().invoke(cli, ["compile", str(src), "--omit-empty"])
        assert result.exit_code == 0
        assert result.output == "a b {\n  x: 1;\n}\n"

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["-v", "compile", str(FIXTURES / "main.less")])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_file(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "main.less")])
        assert result.exit_code == 0
        assert "OK: main.less (4 rule(s), 2 variable(s))" in result.output

    def test_cycle_reported(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "cycle_a.less")])
        assert result.exit_code == 1
        assert "Circular import" in result.output
        assert "Summary: 1 error(s), 0 warning(s)" in result.output

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "unclosed.less")])
        assert result.exit_code == 1
        assert "Parse error" in result.output
