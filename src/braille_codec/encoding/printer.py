"""
Braille Line Printer
====================

Renders Braille text into a line buffer and emits it line by line.

The line buffer holds up to line_length character cells side by side,
separated by spacing columns. Spacing columns and unwritten cells hold
the font's space symbol. The buffer size is fixed when the
printer is created:

    total_width = line_length * cell_width + (line_length - 1) * spacing

Example: 5 cells of width 2 with 1 column of spacing need 14 columns.

Write operations place bitmaps at the cursor and advance it. When the
buffer is full, further characters are dropped; there is no automatic
wrapping to a new line. flush() sends every buffer row to the output
sink and starts over with an empty buffer.

Example:
    >>> font = BrailleFont(3, 2, "o", ".", BrailleEncoder())
    >>> printer = LinePrinter(font, line_length=2, spacing=1)
    >>> printer.write_string("hi")
    >>> printer.flush()
    o...o
    oo.o.
    .....
"""

import io
import logging
from typing import Callable, List, Optional

from braille_codec.encoding.font import BrailleFont
from braille_codec.errors import ConfigurationError

logger = logging.getLogger(__name__)


class LinePrinter:
    """
    Line buffer with cursor for printing Braille characters.

    Args:
        font: Provides the bitmap for each character
        line_length: Maximum number of cells per line (> 0)
        spacing: Space-symbol columns between adjacent cells (> 0)
        emit: Called once per buffer row on flush (default: print)

    Raises:
        ConfigurationError: If font is None, or line_length or spacing
            is not positive
    """

    def __init__(
        self,
        font: BrailleFont,
        line_length: int,
        spacing: int,
        emit: Optional[Callable[[str], None]] = None,
    ):
        if font is None:
            raise ConfigurationError("a line printer needs a font", setting="font")
        if line_length <= 0:
            raise ConfigurationError(
                f"line_length must be positive, got {line_length}",
                setting="line_length",
                value=line_length,
            )
        if spacing <= 0:
            raise ConfigurationError(
                f"spacing must be positive, got {spacing}",
                setting="spacing",
                value=spacing,
            )

        self._font = font
        self._line_length = line_length
        self._spacing = spacing
        self._emit = emit if emit is not None else print

        self._buffer: List[List[str]] = []
        self._cursor = 0
        self._create_buffer()

    def _create_buffer(self) -> None:
        """Allocate a blank buffer and move the cursor to the start."""
        self._buffer = [
            [self._font.space_symbol] * self.total_width for _ in range(self._font.height)
        ]
        self._cursor = 0

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def font(self) -> BrailleFont:
        return self._font

    @property
    def line_length(self) -> int:
        """Maximum number of cells per line."""
        return self._line_length

    @property
    def spacing(self) -> int:
        """Space-symbol columns between adjacent cells."""
        return self._spacing

    @property
    def total_width(self) -> int:
        """Width of the buffer in output columns."""
        return (
            self._line_length * self._font.width
            + (self._line_length - 1) * self._spacing
        )

    @property
    def cursor(self) -> int:
        """Number of characters written since the last flush or clear."""
        return self._cursor

    def compute_offset(self, cursor: int) -> int:
        """
        Buffer column where the cell at the given cursor position ends.

        This is the column right after the previous cell, i.e. where the
        spacing in front of the next cell begins.
        """
        if cursor == 0:
            return 0
        return cursor * self._font.width + (cursor - 1) * self._spacing

    def can_write(self) -> bool:
        """True if another character fits into the buffer."""
        if self._cursor == 0:
            return True
        end = self.compute_offset(self._cursor) + self._spacing + self._font.width
        return end <= self.total_width

    # =========================================================================
    # Writing
    # =========================================================================

    def write_character(self, character: str) -> None:
        """
        Write one character's bitmap at the cursor and advance the cursor.

        Characters without a Braille letter print as blank cells. If the
        buffer is full the character is dropped and nothing changes.
        """
        if not self.can_write():
            logger.debug(
                f"Line buffer full ({self._line_length} cells), dropped {character!r}"
            )
            return

        bitmap = self._font.get_bitmap(character)
        start = 0 if self._cursor == 0 else self.compute_offset(self._cursor) + self._spacing
        for row in range(self._font.height):
            self._buffer[row][start:start + self._font.width] = bitmap[row]

        self._cursor += 1

    def write_string(self, text: str) -> None:
        """Write each character of text in order. Overflow is dropped."""
        for character in text:
            self.write_character(character)

    # =========================================================================
    # Output
    # =========================================================================

    def rows(self) -> List[str]:
        """Current buffer content, one string per row."""
        return ["".join(row) for row in self._buffer]

    def flush(self) -> None:
        """Emit every buffer row top to bottom, then clear the buffer."""
        for row in self.rows():
            self._emit(row)
        self.clear()

    def clear(self) -> None:
        """Discard the buffer content without emitting it."""
        self._create_buffer()

    def render_image(self, scale: int = 4) -> bytes:
        """
        Render the current buffer as a PNG image.

        Raised dots are drawn as dark squares, everything else as light
        background. The buffer is left unchanged.

        Args:
            scale: Pixel size of one buffer column/row (default 4)

        Returns:
            PNG image bytes
        """
        from PIL import Image

        if scale <= 0:
            raise ConfigurationError(
                f"scale must be positive, got {scale}", setting="scale", value=scale
            )

        width = self.total_width
        height = self._font.height
        img = Image.new("L", (width * scale, height * scale), color=230)

        dot = self._font.dot_symbol
        for y, row in enumerate(self._buffer):
            for x, symbol in enumerate(row):
                if symbol != dot:
                    continue
                for sy in range(scale):
                    for sx in range(scale):
                        img.putpixel((x * scale + sx, y * scale + sy), 20)

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()
