"""
Configuration Unit Tests
========================

Tests for CodecConfig defaults, environment overrides and builders.
"""

import pytest

from braille_codec.config import CodecConfig
from braille_codec.decoding import BrailleReader
from braille_codec.encoding import LinePrinter
from braille_codec.errors import ConfigurationError

ENV_VARS = [
    "BRAILLE_CELL_HEIGHT",
    "BRAILLE_CELL_WIDTH",
    "BRAILLE_DOT_SYMBOL",
    "BRAILLE_SPACE_SYMBOL",
    "BRAILLE_SPACING",
    "BRAILLE_LINE_LENGTH",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all BRAILLE_* variables."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# =============================================================================
# Defaults and Environment
# =============================================================================

class TestCodecConfigDefaults:
    """Test default values and from_env()."""

    def test_defaults(self):
        config = CodecConfig()
        assert (config.cell_height, config.cell_width) == (3, 2)
        assert (config.dot_symbol, config.space_symbol) == ("o", ".")
        assert config.spacing == 1
        assert config.line_length == 40

    def test_from_env_without_variables(self, clean_env):
        assert CodecConfig.from_env() == CodecConfig()

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("BRAILLE_SPACING", "4")
        clean_env.setenv("BRAILLE_LINE_LENGTH", "12")
        clean_env.setenv("BRAILLE_DOT_SYMBOL", "#")
        clean_env.setenv("BRAILLE_SPACE_SYMBOL", "-")
        config = CodecConfig.from_env()
        assert config.spacing == 4
        assert config.line_length == 12
        assert config.dot_symbol == "#"
        assert config.space_symbol == "-"

    def test_from_env_ignores_invalid_integers(self, clean_env):
        clean_env.setenv("BRAILLE_SPACING", "wide")
        clean_env.setenv("BRAILLE_CELL_HEIGHT", "4")
        config = CodecConfig.from_env()
        assert config.spacing == 1
        assert config.cell_height == 4

    def test_with_overrides_skips_none(self):
        config = CodecConfig().with_overrides(spacing=3, line_length=None)
        assert config.spacing == 3
        assert config.line_length == 40


# =============================================================================
# Validation
# =============================================================================

class TestCodecConfigValidation:
    """Test validate() and validate_reader()."""

    def test_defaults_valid(self):
        CodecConfig().validate()

    @pytest.mark.parametrize("setting", ["cell_height", "cell_width", "spacing", "line_length"])
    def test_non_positive(self, setting):
        config = CodecConfig().with_overrides(**{setting: 0})
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        assert exc_info.value.setting == setting

    def test_multi_character_symbol(self):
        with pytest.raises(ConfigurationError):
            CodecConfig(dot_symbol="oo").validate()

    def test_identical_symbols(self):
        with pytest.raises(ConfigurationError):
            CodecConfig(dot_symbol="x", space_symbol="x").validate()

    def test_reader_accepts_dot_equal_to_space(self):
        CodecConfig(dot_symbol=".", space_symbol=".").validate_reader()

    @pytest.mark.parametrize("overrides,setting", [
        ({"spacing": 0}, "spacing"),
        ({"spacing": -2}, "spacing"),
        ({"dot_symbol": "oo"}, "dot_symbol"),
        ({"dot_symbol": ""}, "dot_symbol"),
    ])
    def test_reader_rejects(self, overrides, setting):
        with pytest.raises(ConfigurationError) as exc_info:
            CodecConfig(**overrides).validate_reader()
        assert exc_info.value.setting == setting


# =============================================================================
# Builders
# =============================================================================

class TestCodecConfigBuilders:
    """Test the font, printer and reader factories."""

    def test_build_font(self):
        font = CodecConfig(cell_height=4, dot_symbol="#").build_font()
        assert font.height == 4
        assert font.dot_symbol == "#"

    def test_build_printer(self):
        rows = []
        printer = CodecConfig(line_length=2, spacing=1).build_printer(emit=rows.append)
        assert isinstance(printer, LinePrinter)
        printer.write_string("hi")
        printer.flush()
        assert rows == ["o...o", "oo.o.", "....."]

    def test_build_reader(self):
        reader = CodecConfig().build_reader()
        assert isinstance(reader, BrailleReader)
        assert reader.translate_line(["o...o", "oo.o.", "....."], "o", 1) == "hi"

    def test_build_rejects_invalid(self):
        with pytest.raises(ConfigurationError):
            CodecConfig(line_length=0).build_printer()
