"""
Braille Cell Geometry
=====================

Shared constants for the six-dot Braille cell.

A cell is 2 columns x 3 rows. Its dots are numbered 1-3 down the left
column and 4-6 down the right column. A cell is stored as a 6-bit dot
pattern where bit i corresponds to dot i+1, so the bit order is
column-major:

    bit 0 (dot 1)   bit 3 (dot 4)
    bit 1 (dot 2)   bit 4 (dot 5)
    bit 2 (dot 3)   bit 5 (dot 6)

Bit i therefore sits at row (i % 3), column (i // 3).
"""

from typing import Sequence, Tuple

CELL_HEIGHT = 3
CELL_WIDTH = 2
PATTERN_BITS = CELL_HEIGHT * CELL_WIDTH  # 6
PATTERN_MASK = (1 << PATTERN_BITS) - 1   # 0x3F

SPACE = " "
SPACE_PATTERN = 0b000000

# Decoder result for a bitmap that is missing or has the wrong shape.
# Distinct from every decodable character, including the space.
INVALID_SYMBOL = "\x00"

# Immutable bitmap as produced by a font: rows of single-character cells.
Bitmap = Tuple[Tuple[str, ...], ...]

# Anything indexable as bitmap[row][col], e.g. a list of row strings.
BitmapLike = Sequence[Sequence[str]]


def bit_position(bit: int) -> Tuple[int, int]:
    """Return the (row, column) of a pattern bit inside the 3x2 cell."""
    return bit % CELL_HEIGHT, bit // CELL_HEIGHT
