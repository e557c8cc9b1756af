# =============================================================================
# test_cli.py - zynkc Command-Line Tests
# =============================================================================
# Tests for the zynkc CLI tool, run through click's CliRunner.
# =============================================================================

import pytest
from click.testing import CliRunner

from zynk.cli.zynkc import main, SOURCE_RULE, RESULT_RULE
from zynk.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def hello(tmp_path):
    path = tmp_path / "hello.zynk"
    path.write_text("let x to 5\nprint(x)\n")
    return path


class TestZynkcCLI:
    """Tests for the zynkc CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Compile a Zynk program to C++" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "zynkc" in result.output

    def test_cli_compiles_file(self, runner, hello):
        result = runner.invoke(main, [str(hello)])
        assert result.exit_code == 0
        assert result.output.count(SOURCE_RULE) == 2
        assert result.output.count(RESULT_RULE) == 2
        assert "let x to 5" in result.output
        assert "int x=5;" in result.output
        assert "std::cout<<x<<std::endl;" in result.output
        # Source section comes before the generated code
        assert result.output.index("let x to 5") < result.output.index("int x=5;")

    def test_cli_directory_uses_init(self, runner, tmp_path):
        (tmp_path / "init.zynk").write_text("print(1)")
        result = runner.invoke(main, [str(tmp_path)])
        assert result.exit_code == 0
        assert "std::cout<<1<<std::endl;" in result.output

    def test_cli_missing_entry(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "source file not found" in result.output

    def test_cli_reports_parse_errors(self, runner, tmp_path):
        path = tmp_path / "bad.zynk"
        path.write_text("let 5 to x\nprint(ok)")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == 0
        assert "!!! -> Error while parsing: Expected variable name after 'let'" in result.output
        assert "std::cout<<ok<<std::endl;" in result.output

    def test_cli_overflow(self, runner, tmp_path):
        path = tmp_path / "big.zynk"
        path.write_text("print(99999999999)")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "out of range" in result.output

    def test_cli_huge_integer_is_build_error(self, runner, tmp_path):
        path = tmp_path / "huge.zynk"
        path.write_text("print(" + "9" * 5000 + ")")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR

    def test_cli_output_file(self, runner, hello, tmp_path):
        out = tmp_path / "hello.cpp"
        result = runner.invoke(main, [str(hello), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text().startswith("#include <iostream>\n\nint main() {")

    def test_cli_ast(self, runner, hello):
        result = runner.invoke(main, [str(hello), "--ast"])
        assert result.exit_code == 0
        assert "Let x = Integer(5)" in result.output
        assert SOURCE_RULE not in result.output

    def test_cli_strict(self, runner, tmp_path):
        path = tmp_path / "strict.zynk"
        path.write_text("print(1); junk")
        result = runner.invoke(main, ["--strict", str(path)])
        assert result.exit_code == 0
        assert "warning: discarded unknown character ';'" in result.output
        assert "warning: skipped token literal" in result.output

    def test_cli_verbose(self, runner, hello):
        result = runner.invoke(main, ["-v", str(hello)])
        assert result.exit_code == 0
        assert "Tokenized: 8 tokens" in result.output
        assert "Parsed: 2 statements" in result.output
