"""
Braille Bitmap Decoder
======================

Decodes a single 3x2 Braille bitmap into an ASCII character.

The decoder reads the six cell positions in column-major order (see
braille_codec.cell), builds the dot pattern, and resolves it through a
BrailleSymbolTree.

Results:
- A letter, for a pattern in the alphabet
- ' ' for the empty pattern, and also for any pattern with no letter.
  An unknown pattern is not distinguished from a space.
- INVALID_SYMBOL ('\\x00') when the bitmap is missing or not 3x2
"""

import logging
from typing import Optional

from braille_codec.cell import (
    CELL_HEIGHT,
    CELL_WIDTH,
    INVALID_SYMBOL,
    PATTERN_BITS,
    SPACE,
    BitmapLike,
    bit_position,
)
from braille_codec.decoding.tree import BrailleSymbolTree
from braille_codec.encoding.encoder import BrailleEncoder

logger = logging.getLogger(__name__)


def has_cell_shape(bitmap: Optional[BitmapLike]) -> bool:
    """True if bitmap has exactly 3 rows of exactly 2 cells."""
    if bitmap is None or len(bitmap) != CELL_HEIGHT:
        return False
    return all(row is not None and len(row) == CELL_WIDTH for row in bitmap)


def bitmap_to_pattern(bitmap: BitmapLike, dot_symbol: str) -> int:
    """
    Build the dot pattern of a 3x2 bitmap.

    Bit i is set if the cell at row (i % 3), column (i // 3) equals
    dot_symbol. Any other symbol counts as a flat position.
    """
    pattern = 0
    for bit in range(PATTERN_BITS):
        row, col = bit_position(bit)
        if bitmap[row][col] == dot_symbol:
            pattern |= 1 << bit
    return pattern


class BrailleDecoder:
    """
    Decodes Braille bitmaps using a symbol tree built from an encoder.

    Args:
        encoder: The encoder whose patterns the bitmaps were drawn with
    """

    def __init__(self, encoder: BrailleEncoder):
        self._tree = BrailleSymbolTree(encoder)

    @property
    def tree(self) -> BrailleSymbolTree:
        return self._tree

    def decode_bitmap(self, bitmap: Optional[BitmapLike], dot_symbol: str) -> str:
        """
        Decode one bitmap into a character.

        Args:
            bitmap: 3 rows of 2 symbols (e.g. a font bitmap or a list of
                two-character strings), or None
            dot_symbol: Symbol that marks a raised dot

        Returns:
            The decoded letter, ' ' for a blank or unknown cell, or
            INVALID_SYMBOL if the bitmap is None or not 3x2
        """
        if not has_cell_shape(bitmap):
            logger.debug("Rejected bitmap: not a 3x2 cell")
            return INVALID_SYMBOL

        pattern = bitmap_to_pattern(bitmap, dot_symbol)
        node = self._tree.lookup(pattern)
        if node is None or node.symbol is None:
            return SPACE
        return node.symbol
