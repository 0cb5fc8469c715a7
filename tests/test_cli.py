"""
CLI Unit Tests
==============

Tests for the brlcodec command-line tool.
"""

import pytest
from click.testing import CliRunner

from braille_codec import __version__
from braille_codec.cli.brlcodec import chunk_text, image_path, main
from braille_codec.cli.errors import ExitCode, handle_cli_exception
from braille_codec.errors import ConfigurationError, ScanFormatError


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    for var in ("BRAILLE_SPACING", "BRAILLE_LINE_LENGTH", "BRAILLE_DOT_SYMBOL",
                "BRAILLE_SPACE_SYMBOL", "BRAILLE_CELL_HEIGHT", "BRAILLE_CELL_WIDTH"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


# =============================================================================
# Helper Tests
# =============================================================================

class TestHelpers:
    """Test chunking and image naming."""

    def test_chunk_text(self):
        assert chunk_text("abcde", 2) == ["ab", "cd", "e"]

    def test_chunk_empty(self):
        assert chunk_text("", 5) == [""]

    def test_image_path_single(self, tmp_path):
        assert image_path(tmp_path / "out.png", 0, 1) == tmp_path / "out.png"

    def test_image_path_numbered(self, tmp_path):
        assert image_path(tmp_path / "out.png", 1, 3) == tmp_path / "out_2.png"


# =============================================================================
# General CLI Tests
# =============================================================================

class TestMainGroup:
    """Test help and version."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Print and read six-dot Braille" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Encode Command Tests
# =============================================================================

class TestEncodeCommand:
    """Test 'brlcodec encode'."""

    def test_encode_hi(self, runner):
        result = runner.invoke(main, ["encode", "-n", "2", "-s", "1", "hi"])
        assert result.exit_code == 0
        assert result.output == "o...o\noo.o.\n.....\n"

    def test_encode_joins_arguments(self, runner):
        result = runner.invoke(main, ["encode", "-n", "3", "a", "b"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "o.....o."

    def test_wrap_continues_on_next_line(self, runner):
        result = runner.invoke(main, ["encode", "-n", "2", "abc"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 6

    def test_no_wrap_drops_overflow(self, runner):
        result = runner.invoke(main, ["encode", "-n", "2", "--no-wrap", "abc"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["o..o.", "...o.", "....."]

    def test_empty_text(self, runner):
        result = runner.invoke(main, ["encode", "-n", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["....."] * 3

    def test_custom_symbols(self, runner):
        result = runner.invoke(main, ["encode", "-n", "1", "--dot", "#", "--space", "-", "a"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["#-", "--", "--"]

    def test_environment_defaults(self, runner, monkeypatch):
        monkeypatch.setenv("BRAILLE_SPACING", "3")
        monkeypatch.setenv("BRAILLE_LINE_LENGTH", "2")
        result = runner.invoke(main, ["encode", "ab"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "o....o."

    def test_output_file(self, runner, tmp_path):
        out = tmp_path / "hi.txt"
        result = runner.invoke(main, ["encode", "-n", "2", "-o", str(out), "hi"])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "o...o\noo.o.\n.....\n"

    def test_image_output(self, runner, tmp_path):
        image = tmp_path / "hi.png"
        result = runner.invoke(main, ["encode", "-n", "2", "--image", str(image), "hi"])
        assert result.exit_code == 0
        assert image.read_bytes().startswith(b"\x89PNG")

    def test_image_per_line(self, runner, tmp_path):
        image = tmp_path / "abc.png"
        result = runner.invoke(main, ["encode", "-n", "2", "--image", str(image), "abc"])
        assert result.exit_code == 0
        assert (tmp_path / "abc_1.png").exists()
        assert (tmp_path / "abc_2.png").exists()

    def test_invalid_spacing(self, runner):
        result = runner.invoke(main, ["encode", "-s", "0", "hi"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "spacing must be positive" in result.output


# =============================================================================
# Decode Command Tests
# =============================================================================

class TestDecodeCommand:
    """Test 'brlcodec decode'."""

    def test_decode_stdin(self, runner):
        result = runner.invoke(main, ["decode"], input="o. .o\noo o.\n.. ..\n")
        assert result.exit_code == 0
        assert result.output == "hi\n"

    def test_decode_file(self, runner, tmp_path):
        scan = tmp_path / "scan.txt"
        scan.write_text("o.  o.\n..  o.\n..  ..\n", encoding="utf-8")
        result = runner.invoke(main, ["decode", str(scan), "-s", "2"])
        assert result.exit_code == 0
        assert result.output == "ab\n"

    def test_decode_multiple_bands(self, runner):
        scan = "o. .o\noo o.\n.. ..\n\no. o.\n.. o.\n.. ..\n"
        result = runner.invoke(main, ["decode"], input=scan)
        assert result.exit_code == 0
        assert result.output.splitlines() == ["hi", "ab"]

    def test_dot_symbol_may_match_default_space(self, runner):
        """The read path ignores the space symbol, so "." works as the dot."""
        result = runner.invoke(main, ["decode", "--dot", "."], input=".# ..\n## ##\n## ##\n")
        assert result.exit_code == 0
        assert result.output == "ac\n"

    def test_non_positive_spacing(self, runner):
        result = runner.invoke(main, ["decode", "-s", "0"], input="o. .o\noo o.\n.. ..\n")
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "spacing must be positive" in result.output

    def test_wrong_row_count(self, runner):
        result = runner.invoke(main, ["decode"], input="o. .o\noo o.\n")
        assert result.exit_code == ExitCode.CODEC_ERROR
        assert "multiple of 3" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["decode", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_ragged_rows_drop_invalid_cells(self, runner):
        result = runner.invoke(main, ["decode"], input="o. .o\noo o.\n.. .\n")
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "h"

    def test_encode_decode_round_trip(self, runner):
        encoded = runner.invoke(main, ["encode", "-s", "2", "hello world"])
        assert encoded.exit_code == 0
        decoded = runner.invoke(main, ["decode", "-s", "2"], input=encoded.output)
        assert decoded.exit_code == 0
        assert decoded.output.rstrip() == "hello world"


# =============================================================================
# Demo and Table Command Tests
# =============================================================================

class TestDemoAndTable:
    """Test 'brlcodec demo' and 'brlcodec table'."""

    def test_demo(self, runner):
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        assert "# 'Hello!! World'" in result.output
        lines = result.output.splitlines()
        index = lines.index("# 'Hello!! World' (line length 12, spacing 4)")
        assert all(len(row) == 68 for row in lines[index + 1:index + 4])

    def test_table(self, runner):
        result = runner.invoke(main, ["table"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 26
        assert lines[7].startswith("h  dots 1-2-5")
        assert lines[7].endswith("0b010011")


# =============================================================================
# Error Handling Tests
# =============================================================================

class TestErrorHandling:
    """Test the exception to exit code mapping."""

    @pytest.mark.parametrize("error,code", [
        (ConfigurationError("spacing must be positive", setting="spacing", value=0),
         ExitCode.INVALID_ARGS),
        (ScanFormatError(4), ExitCode.CODEC_ERROR),
        (FileNotFoundError("scan.txt"), ExitCode.INVALID_ARGS),
        (RuntimeError("boom"), ExitCode.INTERNAL_ERROR),
    ])
    def test_exit_codes(self, error, code, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error, error_type="Decode")
        assert exc_info.value.code == code
        assert str(error) in capsys.readouterr().err
