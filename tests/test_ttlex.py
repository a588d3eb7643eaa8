# =============================================================================
# test_ttlex.py - Token Dump CLI Tests
# =============================================================================
# Tests for the ttlex command-line tool and the shared CLI error handling.
# =============================================================================

import pytest
from click.testing import CliRunner

from teeny_sdk.cli.errors import ExitCode
from teeny_sdk.cli.ttlex import main, format_token
from teeny_sdk.scanner import Token, TokenKind


@pytest.fixture
def runner():
    return CliRunner()


def write_source(tmp_path, text: str):
    path = tmp_path / "prog.teeny"
    path.write_text(text, encoding="utf-8")
    return path


class TestFormatToken:
    """Tests for the token line format."""

    def test_regular_token(self):
        token = Token("x", TokenKind.IDENTIFIER, 2, 5)
        assert format_token(token) == "2:5      IDENTIFIER      'x'"

    def test_end_of_input_has_no_lexeme(self):
        token = Token("\0", TokenKind.END_OF_INPUT, 3, 1)
        assert format_token(token) == "3:1      END_OF_INPUT"


class TestTtlexCLI:
    """Tests for the ttlex CLI tool."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Dump the tokens" in result.output

    def test_cli_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "ttlex" in result.output

    def test_cli_dump(self, runner, tmp_path):
        """Each token is printed with position and kind."""
        path = write_source(tmp_path, 'LET x = 5\nPRINT "100%"\n')

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        lines = result.output.splitlines()
        assert lines[0].split() == ["1:1", "LET", "'LET'"]
        assert "STRING" in result.output
        assert "'100\\\\%'" in result.output
        assert lines[-1].split() == ["4:1", "END_OF_INPUT"]

    def test_cli_verbose_summary(self, runner, tmp_path):
        """Verbose mode adds a summary of token counts."""
        path = write_source(tmp_path, "PRINT 1\nPRINT 2\n")

        result = runner.invoke(main, ["-v", str(path)])

        assert result.exit_code == 0
        assert "8 tokens, 2 lines" in result.output
        assert "PRINT" in result.output.split("Scanned")[1]

    def test_cli_lexical_error(self, runner, tmp_path):
        """A lexical error is reported with its location and exit code 1."""
        path = write_source(tmp_path, "PRINT 1\nLET a = @\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert f"{path}:2:9: error: unexpected character '@'" in result.output

    def test_cli_missing_file(self, runner, tmp_path):
        """A missing input file is a usage error."""
        result = runner.invoke(main, [str(tmp_path / "nope.teeny")])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_invalid_utf8(self, runner, tmp_path):
        """Undecodable input is reported as invalid input, not a crash."""
        path = tmp_path / "bad.teeny"
        path.write_bytes(b"PRINT \xff\xfe\n")

        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "UTF-8" in result.output

    def test_cli_trace(self, runner, tmp_path):
        """--trace still dumps tokens normally."""
        path = write_source(tmp_path, "GOTO top\n")

        result = runner.invoke(main, ["--trace", str(path)])

        assert result.exit_code == 0
        assert "GOTO" in result.output
