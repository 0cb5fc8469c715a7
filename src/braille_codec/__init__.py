"""
Braille Codec - Six-Dot Braille Transcoding
===========================================

This package converts ASCII text to six-dot Braille bitmaps and reads
scanned Braille bitmaps back into ASCII text.

A Braille cell has two columns of three dots. Each supported character
(the letters a-z and the space) has one 6-bit dot pattern; the same
pattern drives both directions.

Main Components
---------------
- **encoding**: Render path
    BrailleEncoder (letter -> pattern), BrailleFont (pattern -> bitmap),
    LinePrinter (bitmaps -> output lines)

- **decoding**: Read path
    BrailleSymbolTree (pattern -> letter), BrailleDecoder (bitmap -> letter),
    BrailleReader (scan lines -> text)

- **config**: CodecConfig with defaults and environment overrides

Quick Start
-----------
Print Braille:
    >>> from braille_codec import BrailleEncoder, BrailleFont, LinePrinter
    >>> font = BrailleFont(3, 2, "o", ".", BrailleEncoder())
    >>> printer = LinePrinter(font, line_length=12, spacing=4)
    >>> printer.write_string("hello")
    >>> printer.flush()

Read it back:
    >>> from braille_codec import BrailleDecoder, BrailleReader
    >>> reader = BrailleReader(BrailleDecoder(BrailleEncoder()))
    >>> reader.translate_line(["o. .o", "oo o.", ".. .."], "o", 1)
    'hi'

Or use the command-line tool:
    $ brlcodec encode "hello world"
    $ brlcodec encode "hello" | brlcodec decode

Only lowercase letters and space are encoded. Numerals, punctuation and
capitalization signs are not supported; such characters print as blank
cells.
"""

__version__ = "1.0.0"
__author__ = "braille-codec Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from braille_codec.cell import (
    CELL_HEIGHT,
    CELL_WIDTH,
    INVALID_SYMBOL,
    PATTERN_BITS,
    SPACE_PATTERN,
    Bitmap,
)
from braille_codec.errors import (
    BrailleError,
    ConfigurationError,
    UnsupportedCharacterError,
    ScanFormatError,
)
from braille_codec.encoding import (
    BrailleEncoder,
    BrailleFont,
    LinePrinter,
    LETTER_DOTS,
    LETTER_PATTERNS,
)
from braille_codec.decoding import (
    BrailleSymbolTree,
    TreeNode,
    BrailleDecoder,
    BrailleReader,
    bitmap_to_pattern,
)
from braille_codec.config import CodecConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Cell geometry
    "CELL_HEIGHT",
    "CELL_WIDTH",
    "INVALID_SYMBOL",
    "PATTERN_BITS",
    "SPACE_PATTERN",
    "Bitmap",
    # Exception hierarchy
    "BrailleError",
    "ConfigurationError",
    "UnsupportedCharacterError",
    "ScanFormatError",
    # Render path
    "BrailleEncoder",
    "BrailleFont",
    "LinePrinter",
    "LETTER_DOTS",
    "LETTER_PATTERNS",
    # Read path
    "BrailleSymbolTree",
    "TreeNode",
    "BrailleDecoder",
    "BrailleReader",
    "bitmap_to_pattern",
    # Configuration
    "CodecConfig",
]
