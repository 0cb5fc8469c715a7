"""
Braille Encoding (Render Path)
==============================

Turns ASCII text into printable Braille bitmaps.

This module provides:
- **BrailleEncoder**: Letter to 6-bit dot pattern
- **BrailleFont**: Precomputed bitmaps for a-z and the blank cell
- **LinePrinter**: Line buffer with cursor, spacing and flush

Quick Start
-----------
    >>> from braille_codec.encoding import BrailleEncoder, BrailleFont, LinePrinter
    >>> font = BrailleFont(3, 2, "o", ".", BrailleEncoder())
    >>> printer = LinePrinter(font, line_length=12, spacing=4)
    >>> printer.write_string("Hello World")
    >>> printer.flush()
"""

from braille_codec.encoding.encoder import (
    LETTER_DOTS,
    LETTER_PATTERNS,
    BrailleEncoder,
    dots_to_pattern,
)
from braille_codec.encoding.font import BrailleFont
from braille_codec.encoding.printer import LinePrinter

__all__ = [
    "LETTER_DOTS",
    "LETTER_PATTERNS",
    "BrailleEncoder",
    "dots_to_pattern",
    "BrailleFont",
    "LinePrinter",
]
