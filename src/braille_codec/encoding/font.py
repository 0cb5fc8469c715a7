"""
Braille Font
============

A monospaced set of printable Braille characters.

Every printable character is a bitmap: a grid of dot and space symbols,
height rows by width columns. The font computes all 26 letter bitmaps
plus one blank bitmap once, at construction time. Bitmaps are immutable
tuples, so a line buffer may reference the same bitmap for every
occurrence of a letter.

Cell sizes other than 3x2 are accepted:
- Larger cells keep the dots in the top-left 3x2 region and pad the rest
  with the space symbol.
- Smaller cells silently lose the dots that do not fit.

Example:
    >>> font = BrailleFont(3, 2, "o", ".", BrailleEncoder())
    >>> for row in font.get_bitmap("h"):
    ...     print("".join(row))
    o.
    oo
    ..
"""

import logging
from typing import Dict

from braille_codec.cell import CELL_HEIGHT, CELL_WIDTH, Bitmap
from braille_codec.encoding.encoder import LETTER_PATTERNS, BrailleEncoder
from braille_codec.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _check_symbol(name: str, symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ConfigurationError(
            f"{name} must be a single character, got {symbol!r}",
            setting=name,
            value=symbol,
        )


class BrailleFont:
    """
    Precomputed bitmaps for the letters a-z and the blank cell.

    Args:
        height: Rows per character bitmap
        width: Columns per character bitmap
        dot_symbol: Symbol for a raised dot
        space_symbol: Symbol for a flat position
        encoder: Provides the dot pattern of each letter

    Raises:
        ConfigurationError: If encoder is None, a dimension is not positive,
            or a symbol is not a single character
    """

    def __init__(
        self,
        height: int,
        width: int,
        dot_symbol: str,
        space_symbol: str,
        encoder: BrailleEncoder,
    ):
        if encoder is None:
            raise ConfigurationError("a font needs an encoder", setting="encoder")
        if height <= 0 or width <= 0:
            raise ConfigurationError(
                f"cell size must be positive, got {height}x{width}",
                setting="cell_size",
                value=(height, width),
            )
        _check_symbol("dot_symbol", dot_symbol)
        _check_symbol("space_symbol", space_symbol)

        self._height = height
        self._width = width
        self._dot_symbol = dot_symbol
        self._space_symbol = space_symbol

        self._letters: Dict[str, Bitmap] = {
            letter: self._build_bitmap(encoder.to_pattern(letter))
            for letter in LETTER_PATTERNS
        }
        self._blank: Bitmap = self._build_bitmap(0)

        if height < CELL_HEIGHT or width < CELL_WIDTH:
            logger.debug(
                f"Font cell {height}x{width} is smaller than "
                f"{CELL_HEIGHT}x{CELL_WIDTH}, dots will be truncated"
            )
        logger.debug(f"Built font: {len(self._letters)} letters, {height}x{width} cells")

    def _build_bitmap(self, pattern: int) -> Bitmap:
        rows = []
        for row in range(self._height):
            cells = []
            for col in range(self._width):
                if row < CELL_HEIGHT and col < CELL_WIDTH:
                    raised = (pattern >> (row + CELL_HEIGHT * col)) & 1
                    cells.append(self._dot_symbol if raised else self._space_symbol)
                else:
                    cells.append(self._space_symbol)
            rows.append(tuple(cells))
        return tuple(rows)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_bitmap(self, character: str) -> Bitmap:
        """
        Get the printable bitmap for a character.

        Letters (either case) return their Braille cell. Every other
        character, including the space, returns the blank bitmap.
        """
        if len(character) == 1 and character.isascii() and character.isalpha():
            return self._letters[character.lower()]
        return self._blank

    @property
    def blank(self) -> Bitmap:
        """The all-space bitmap used for spaces and unsupported characters."""
        return self._blank

    @property
    def height(self) -> int:
        """Number of rows in every bitmap."""
        return self._height

    @property
    def width(self) -> int:
        """Number of columns in every bitmap (the font is monospaced)."""
        return self._width

    @property
    def dot_symbol(self) -> str:
        return self._dot_symbol

    @property
    def space_symbol(self) -> str:
        return self._space_symbol

    def get_height(self) -> int:
        return self._height

    def get_width(self) -> int:
        return self._width
