"""
Braille Codec Configuration
===========================

Default cell geometry and symbols shared by the render and read paths.
Configuration can come from:
- Default values (defined here)
- Environment variables (CodecConfig.from_env)
- Explicit keyword arguments / command-line options

Printer and reader must agree on spacing and dot symbol for a scan to
read back as the text that was printed.

Copyright (c) 2026 braille-codec Contributors
"""

import os
from dataclasses import dataclass, replace
from typing import Callable, Optional

from braille_codec.decoding import BrailleDecoder, BrailleReader
from braille_codec.encoding import BrailleEncoder, BrailleFont, LinePrinter
from braille_codec.errors import ConfigurationError


@dataclass
class CodecConfig:
    """
    Settings for building fonts, printers and readers.

    Attributes:
        cell_height: Rows per character bitmap (default: 3)
        cell_width: Columns per character bitmap (default: 2)
        dot_symbol: Symbol for a raised dot (default: "o")
        space_symbol: Symbol for a flat dot position (default: ".")
        spacing: Columns between cells (default: 1)
        line_length: Cells per printed line (default: 40)
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # CELL GEOMETRY
    # ═══════════════════════════════════════════════════════════════════════════

    cell_height: int = 3
    cell_width: int = 2

    # ═══════════════════════════════════════════════════════════════════════════
    # SYMBOLS
    # ═══════════════════════════════════════════════════════════════════════════

    dot_symbol: str = "o"
    space_symbol: str = "."

    # ═══════════════════════════════════════════════════════════════════════════
    # LINE LAYOUT
    # ═══════════════════════════════════════════════════════════════════════════

    spacing: int = 1
    line_length: int = 40

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Create CodecConfig from environment variables.

        Environment variables (all optional):
            BRAILLE_CELL_HEIGHT: Rows per cell (integer)
            BRAILLE_CELL_WIDTH: Columns per cell (integer)
            BRAILLE_DOT_SYMBOL: Raised dot symbol
            BRAILLE_SPACE_SYMBOL: Flat position symbol
            BRAILLE_SPACING: Columns between cells (integer)
            BRAILLE_LINE_LENGTH: Cells per line (integer)

        Returns:
            CodecConfig with values from environment variables
        """
        config = cls()

        for name, var in (
            ("cell_height", "BRAILLE_CELL_HEIGHT"),
            ("cell_width", "BRAILLE_CELL_WIDTH"),
            ("spacing", "BRAILLE_SPACING"),
            ("line_length", "BRAILLE_LINE_LENGTH"),
        ):
            if value := os.environ.get(var):
                try:
                    setattr(config, name, int(value))
                except ValueError:
                    pass  # Ignore invalid values

        if dot := os.environ.get("BRAILLE_DOT_SYMBOL"):
            config.dot_symbol = dot
        if space := os.environ.get("BRAILLE_SPACE_SYMBOL"):
            config.space_symbol = space

        return config

    def with_overrides(self, **overrides) -> "CodecConfig":
        """Copy of this config with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    def validate(self) -> None:
        """
        Check all settings.

        Raises:
            ConfigurationError: On a non-positive size or a symbol that is
                not exactly one character
        """
        for name in ("cell_height", "cell_width", "spacing", "line_length"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(
                    f"{name} must be positive, got {value}", setting=name, value=value
                )
        for name in ("dot_symbol", "space_symbol"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ConfigurationError(
                    f"{name} must be a single character, got {value!r}",
                    setting=name,
                    value=value,
                )
        if self.dot_symbol == self.space_symbol:
            raise ConfigurationError(
                "dot_symbol and space_symbol must differ",
                setting="dot_symbol",
                value=self.dot_symbol,
            )

    def validate_reader(self) -> None:
        """
        Check the settings the read path uses.

        A scan only needs the dot symbol and the spacing. The space symbol
        is not consulted, so it may equal the dot symbol here.

        Raises:
            ConfigurationError: On a non-positive spacing or a dot symbol
                that is not exactly one character
        """
        if self.spacing <= 0:
            raise ConfigurationError(
                f"spacing must be positive, got {self.spacing}",
                setting="spacing",
                value=self.spacing,
            )
        if len(self.dot_symbol) != 1:
            raise ConfigurationError(
                f"dot_symbol must be a single character, got {self.dot_symbol!r}",
                setting="dot_symbol",
                value=self.dot_symbol,
            )

    # ═══════════════════════════════════════════════════════════════════════════
    # BUILDERS
    # ═══════════════════════════════════════════════════════════════════════════

    def build_font(self, encoder: Optional[BrailleEncoder] = None) -> BrailleFont:
        self.validate()
        return BrailleFont(
            self.cell_height,
            self.cell_width,
            self.dot_symbol,
            self.space_symbol,
            encoder or BrailleEncoder(),
        )

    def build_printer(
        self,
        emit: Optional[Callable[[str], None]] = None,
        encoder: Optional[BrailleEncoder] = None,
    ) -> LinePrinter:
        return LinePrinter(
            self.build_font(encoder), self.line_length, self.spacing, emit=emit
        )

    def build_reader(self, encoder: Optional[BrailleEncoder] = None) -> BrailleReader:
        return BrailleReader(BrailleDecoder(encoder or BrailleEncoder()))
