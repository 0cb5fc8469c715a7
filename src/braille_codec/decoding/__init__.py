"""
Braille Decoding (Read Path)
============================

Turns scanned Braille bitmaps back into ASCII text.

This module provides:
- **BrailleSymbolTree**: Depth-6 binary trie keyed by dot pattern
- **BrailleDecoder**: One 3x2 bitmap to one character
- **BrailleReader**: Scan rows to text

Quick Start
-----------
    >>> from braille_codec.encoding import BrailleEncoder
    >>> from braille_codec.decoding import BrailleDecoder, BrailleReader
    >>> reader = BrailleReader(BrailleDecoder(BrailleEncoder()))
    >>> reader.translate_line(["o. .o", "oo o.", ".. .."], "o", 1)
    'hi'
"""

from braille_codec.decoding.tree import BrailleSymbolTree, TreeNode
from braille_codec.decoding.decoder import (
    BrailleDecoder,
    bitmap_to_pattern,
    has_cell_shape,
)
from braille_codec.decoding.reader import BrailleReader

__all__ = [
    "BrailleSymbolTree",
    "TreeNode",
    "BrailleDecoder",
    "bitmap_to_pattern",
    "has_cell_shape",
    "BrailleReader",
]
